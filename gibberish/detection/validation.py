"""Module with structural checks of models loaded from untrusted sources."""

from pydantic import TypeAdapter, ValidationError

from gibberish.data_models import BigramCount, Model

_matrix_adapter = TypeAdapter(list[BigramCount])


def is_valid_matrix(matrix: object) -> bool:
    """
    Check whether a matrix is a list of letter pairs with their counts.

    Args:
        matrix (object): A candidate matrix.

    Returns:
        bool: True if every item has a two-character `x` and a numeric `y`.
    """
    if not isinstance(matrix, list | tuple):
        return False
    try:
        _matrix_adapter.validate_python(list(matrix))
    except ValidationError:
        return False
    return True


def is_valid_model(model: object) -> bool:
    """
    Check the structure of a model without raising exceptions.

    Args:
        model (object): A model or raw data, e.g. parsed from a JSON file.

    Returns:
        bool: True if the model has a valid matrix and numeric `min`, `max` and
            `avg` values for both the good and the bad baselines.
    """
    if isinstance(model, Model):
        return True
    if not isinstance(model, dict):
        return False
    if not is_valid_matrix(model.get("matrix")):
        return False
    try:
        Model.model_validate(model)
    except ValidationError:
        return False
    return True
