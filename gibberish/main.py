"""Entry point to the application as a Typer CLI."""

import math
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from loguru import logger
from typer import Typer

from gibberish.configuration import config

if TYPE_CHECKING:
    from fastapi import FastAPI

app = Typer(no_args_is_help=True)

description = """
**Gibberish Detector** checks whether a text is random letter mashing
or a legitimate language, using frequencies of adjacent letter pairs.
"""

EXIT_GIBBERISH = 1
EXIT_ERROR = 2


@app.callback()
def configure_logging(
    log_level: Annotated[
        str, typer.Option(help="Minimal level of logged messages.")
    ] = config.log_level,
) -> None:
    """Gibberish detection CLI."""
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())


@app.command("train")
def train_model(
    train: Annotated[Path, typer.Option(help="The file with train data.")],
    goodsm: Annotated[Path, typer.Option(help="The file with some good sentences.")],
    badsm: Annotated[Path, typer.Option(help="The file with some bad sentences.")],
    target: Annotated[Path, typer.Option(help="The target file to save the model.")],
) -> None:
    """Train a new model."""
    from gibberish.persistence import save_model
    from gibberish.training.trainer import train_with_files

    try:
        model = train_with_files(
            good_lines_file=goodsm.resolve(),
            bad_lines_file=badsm.resolve(),
            corpus_file=train.resolve(),
        )
    except (OSError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e

    save_model(model, target)
    logger.info(f"Completed train, file written into {target}")


@app.command("test")
def test_text(
    model: Annotated[
        str, typer.Option(help="The model name or the file of the model.")
    ] = config.default_model,
    text: Annotated[str | None, typer.Option(help="The text to check.")] = None,
    file: Annotated[Path | None, typer.Option(help="The text file to check.")] = None,
) -> None:
    """Test if a text is gibberish."""
    from gibberish.detection.classification import BigramDetector
    from gibberish.detection.threshold import is_below_threshold
    from gibberish.persistence import resolve_model

    if file is not None:
        if not file.is_file():
            logger.error(f"There is no such file {file}.")
            raise typer.Exit(code=EXIT_ERROR)
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read {file}: {e}")
            raise typer.Exit(code=EXIT_ERROR) from e

    if not text:
        logger.error("You have not provided any text to check.")
        raise typer.Exit(code=EXIT_ERROR)

    try:
        detector = BigramDetector(resolve_model(model))
    except (OSError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e

    score = detector.detect(text)
    threshold = detector.get_threshold()
    if math.isnan(score):
        logger.error("Text is too short to be classified.")
        raise typer.Exit(code=EXIT_ERROR)

    if is_below_threshold(score, threshold):
        logger.warning(f"Text is Gibberish {score} / {threshold}")
        raise typer.Exit(code=EXIT_GIBBERISH)
    logger.info(f"Text is Valid {score} / {threshold}")


@app.command("evaluate")
def evaluate_model(
    goodsm: Annotated[Path, typer.Option(help="The file with some good sentences.")],
    badsm: Annotated[Path, typer.Option(help="The file with some bad sentences.")],
    model: Annotated[
        str, typer.Option(help="The model name or the file of the model.")
    ] = config.default_model,
) -> None:
    """Evaluate a model on labelled sentences."""
    from gibberish.detection.classification import BigramDetector
    from gibberish.persistence import resolve_model
    from gibberish.training.evaluation import Evaluator

    try:
        detector = BigramDetector(resolve_model(model))
        evaluator = Evaluator()
        evaluator.add_detector(detector)
        results = evaluator.evaluate(
            good_lines=goodsm.read_text(encoding="utf-8"),
            bad_lines=badsm.read_text(encoding="utf-8"),
        )
    except (OSError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from e

    logger.info("Results of the evaluation are the following:")
    for detector_name, evaluation in results.items():
        logger.info(f"\nDetector: {detector_name} ({model})\n{evaluation}")


def create_api() -> "FastAPI":
    """
    Create the FastAPI application serving prebuilt models.

    Returns:
        FastAPI: The application with the detection endpoints under `/v1`.
    """
    from fastapi import FastAPI
    from fastapi.responses import RedirectResponse

    from gibberish.api.router import lifespan
    from gibberish.api.router import router as main_router

    fastapi_app = FastAPI(
        title=config.project_name,
        summary="The API detects gibberish texts.",
        description=description,
        lifespan=lifespan,
        docs_url="/v1/docs",
        openapi_url="/v1/openapi.json",
        redoc_url="/v1/redoc",
    )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/v1/docs")

    fastapi_app.include_router(main_router, prefix="/v1")
    return fastapi_app


@app.command("api")
def run_api() -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    uvicorn.run(create_api(), host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    app()
