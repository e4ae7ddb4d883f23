"""Module with project-wide data models."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from typing_extensions import override

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StrictFloat,
    StrictInt,
    StringConstraints,
)

Number = StrictInt | StrictFloat
LetterPair = Annotated[
    str, StringConstraints(strict=True, min_length=2, max_length=2)
]


class BigramCount(BaseModel):
    """A pair of adjacent letters with the number of its occurrences in a corpus."""

    x: LetterPair
    y: Number

    model_config = ConfigDict(frozen=True)


class BaselineStats(BaseModel):
    """Aggregated scores of labelled reference lines."""

    min: Number
    max: Number
    avg: Number

    model_config = ConfigDict(frozen=True)


class Baseline(BaseModel):
    """Baselines computed for legitimate and gibberish reference lines."""

    good: BaselineStats
    bad: BaselineStats

    model_config = ConfigDict(frozen=True)


class Model(BaseModel):
    """
    Trained model with letter adjacency frequencies and calibration baselines.

    The `matrix` is sorted by the number of occurrences in descending order. It is
    kept as a sequence because the order is visible in persisted model files.
    Lookups go through a mapping built once per model.
    """

    matrix: tuple[BigramCount, ...]
    baseline: Baseline

    model_config = ConfigDict(frozen=True)

    _lookup: dict[str, int | float] = PrivateAttr(default_factory=dict)

    @override
    def model_post_init(self, context: Any, /) -> None:
        self._lookup = {pair.x: pair.y for pair in self.matrix}

    @property
    def lookup(self) -> Mapping[str, int | float]:
        """
        Get a read-only mapping of letter pairs to their number of occurrences.

        Returns:
            Mapping[str, int | float]: Letter pair frequencies of the model.
        """
        return MappingProxyType(self._lookup)


class Evaluation(BaseModel):
    """Evaluation sheet for a detector."""

    accuracy: float = Field(..., ge=0.0, le=1.0)
    recall: float = Field(..., ge=0.0, le=1.0)
    precision: float = Field(..., ge=0.0, le=1.0)
    f1_score: float = Field(..., ge=0.0, le=1.0)

    def __str__(self) -> str:
        """
        Convert the evaluation into a textual form.

        Returns:
            str: Pretty textual form of an evaluation.
        """
        return (
            f"  Accuracy:  {self.accuracy:.4f}\n"
            f"  Recall:  {self.recall:.4f}\n"
            f"  Precision: {self.precision:.4f}\n"
            f"  F1 Score:  {self.f1_score:.4f}"
        )
