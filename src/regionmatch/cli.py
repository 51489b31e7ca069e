from pathlib import Path
from typing import List, Optional

import typer

from .config import ConfigError, Settings
from .logging import get_logger, parse_level, set_level
from .matching.hashtable import hash_compare
from .matching.report import CompareResult, format_comparison, output_path
from .matching.simple import simple_compare
from .raster.image import ImageLoadError, ImageSaveError, RasterImage
from .raster.visualization import draw_bounding_box, highlight_seed, initialize_output, save_output

app = typer.Typer(help="regionmatch - find duplicated regions between images", no_args_is_help=True)


def compare_pair(image_a: RasterImage, image_b: RasterImage, settings: Settings) -> CompareResult:
    """Run the configured engine on one ordered image pair."""
    if settings.method == "hashtable":
        return hash_compare(
            image_a,
            image_b,
            settings.seed_size,
            table_size=settings.table_size,
            compare_fraction=settings.compare_fraction,
        )
    return simple_compare(image_a, image_b, settings.seed_size)


def run(settings: Settings) -> None:
    """Compare every image against every other one, printing and drawing results."""
    logger = get_logger(__name__)

    images = []
    for path in settings.filenames:
        images.append(RasterImage.load(path))
    logger.info(f"Loaded {len(images)} images, method={settings.method}, seed={settings.seed_size}")

    for index_a, (path_a, image_a) in enumerate(zip(settings.filenames, images)):
        typer.echo(str(path_a))
        canvas = initialize_output(image_a)
        color_index = -1
        for index_b, (path_b, image_b) in enumerate(zip(settings.filenames, images)):
            if index_a == index_b:
                continue
            color_index += 1

            result = compare_pair(image_a, image_b, settings)
            for origin in result.seeds:
                highlight_seed(canvas, color_index, origin, settings.seed_size)
            for region in result.regions:
                draw_bounding_box(canvas, region.box_a, color_index)
            typer.echo(format_comparison(str(path_b), result))

        target = output_path(path_a, settings.output_dir)
        save_output(canvas, target)
        logger.info(f"Wrote {target}")


@app.command()
def compare(
    images: List[Path] = typer.Argument(..., help="Images to compare against each other"),
    method: str = typer.Option("simple", "-method", "--method", help="Matching method: 'simple' or 'hashtable'"),
    seed: int = typer.Option(5, "-seed", "--seed", help="Seed block side length in pixels"),
    table: int = typer.Option(1_000_000, "-table", "--table", help="Target number of hash table buckets"),
    compare_fraction: float = typer.Option(0.05, "-compare", "--compare", help="Fraction of hash table buckets to scan, in (0, 1]"),
    out: Path = typer.Option(Path("."), "-out", "--out", help="Directory for output_<name>.ppm visualizations"),
    log_level: Optional[str] = typer.Option(None, "-log-level", "--log-level", help="Log level for this run, e.g. DEBUG or WARNING"),
) -> None:
    """
    Find duplicated rectangular regions between every pair of input images.

    For each image, prints the coverage of each other image's match and writes
    a visualization with each match drawn in its own color.
    """
    logger = get_logger(__name__)

    settings = Settings(
        method=method,
        seed_size=seed,
        table_size=table,
        compare_fraction=compare_fraction,
        output_dir=out,
        filenames=list(images),
        log_level=log_level,
    )
    try:
        settings.validate()
    except ConfigError as exc:
        logger.error(f"Invalid arguments: {exc}")
        raise typer.Exit(code=2) from exc

    if settings.log_level is not None:
        set_level(parse_level(settings.log_level))

    try:
        run(settings)
    except ImageLoadError as exc:
        logger.error(f"Cannot load image: {exc}")
        raise typer.Exit(code=1) from exc
    except ImageSaveError as exc:
        logger.error(f"Cannot write output: {exc}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
