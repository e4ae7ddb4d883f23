"""Module with persistence of models and the registry of prebuilt models."""

import json
from collections.abc import Mapping
from functools import cache
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from gibberish.configuration import config
from gibberish.data_models import Model
from gibberish.detection.validation import is_valid_model
from gibberish.training.trainer import train_with_files


class InvalidModelError(ValueError):
    """Raised when a model file does not have the structure of a model."""


def save_model(model: Model, path: Path) -> None:
    """
    Save a model to a JSON file.

    Args:
        model (Model): The model to be saved.
        path (Path): Target file. Missing parent directories are created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(), encoding="utf-8")


def load_model(path: Path) -> Model:
    """
    Load a model from a JSON file and validate its structure.

    Args:
        path (Path): The model file.

    Raises:
        FileNotFoundError: Raised if the file does not exist.
        InvalidModelError: Raised if the file is not a valid model.

    Returns:
        Model: The loaded model.
    """
    if not path.is_file():
        raise FileNotFoundError(f"There is no such model file {path}.")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidModelError(f"Model file {path} is not a valid JSON.") from e

    if not is_valid_model(data):
        raise InvalidModelError(f"Loaded model {path} is not valid.")
    return Model.model_validate(data)


def load_prebuilt_models(directory: Path) -> Mapping[str, Model]:
    """
    Load all models from a directory keyed by their names.

    A model is either a `<name>.json` model file or a `<name>/` directory with
    `corpus.txt`, `good.txt` and `bad.txt` training files. JSON files take
    precedence over training files of the same name.

    Args:
        directory (Path): Directory with prebuilt models.

    Returns:
        Mapping[str, Model]: Read-only mapping of model names to models. Invalid
            models are skipped.
    """
    models: dict[str, Model] = {}
    if not directory.is_dir():
        logger.warning(f"There is no prebuilt models directory {directory}.")
        return MappingProxyType(models)

    for training_directory in sorted(p for p in directory.iterdir() if p.is_dir()):
        try:
            models[training_directory.name] = train_with_files(
                good_lines_file=training_directory / "good.txt",
                bad_lines_file=training_directory / "bad.txt",
                corpus_file=training_directory / "corpus.txt",
            )
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Skipping prebuilt model {training_directory.name}: {e}")

    for path in sorted(directory.glob("*.json")):
        try:
            models[path.stem] = load_model(path)
        except InvalidModelError as e:
            logger.warning(f"Skipping prebuilt model: {e}")

    return MappingProxyType(models)


@cache
def get_prebuilt_models() -> Mapping[str, Model]:
    """
    Get the registry of models bundled with the package.

    It is built once per process from the configured models directory.

    Returns:
        Mapping[str, Model]: Read-only mapping of model names to models.
    """
    return load_prebuilt_models(config.models_directory)


def resolve_model(
    name_or_path: str, registry: Mapping[str, Model] | None = None
) -> Model:
    """
    Get a prebuilt model by its name or load it from a file.

    Args:
        name_or_path (str): Name of a prebuilt model or a path to a model file.
        registry (Mapping[str, Model] | None, optional): Prebuilt models.
            Defaults to the models bundled with the package.

    Raises:
        FileNotFoundError: Raised if there is neither such model nor such file.
        InvalidModelError: Raised if the file is not a valid model.

    Returns:
        Model: The resolved model.
    """
    if registry is None:
        registry = get_prebuilt_models()
    if name_or_path in registry:
        return registry[name_or_path]

    path = Path(name_or_path).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Cannot load model {name_or_path}.")
    return load_model(path)
