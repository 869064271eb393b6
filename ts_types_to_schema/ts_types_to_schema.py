import json
import logging

import click

from .errors import ExtractionError
from .pipeline import ExtractorConfig, SchemaExtractor, forest_to_json
from .render import render_tree


@click.command()
@click.option("--comments", "-m", default=None, type=click.Path(exists=True, resolve_path=True), help="swc comment records (JSON list)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--tree", is_flag=True, default=False, help="Print the schema forest as a tree")
@click.option("--include-ranges", is_flag=True, default=False, help="Include sourceRange in the output")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("program", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def ts_types_to_schema(comments, config, tree, include_ranges, verbose, program, output):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    with open(program) as f:
        program = json.load(f)

    if comments is not None:
        with open(comments) as f:
            comments = json.load(f)
    else:
        comments = []

    if config is not None:
        with open(config) as f:
            data = json.load(f)
        try:
            config = ExtractorConfig.from_dict(data)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--config") from e
    else:
        config = ExtractorConfig()

    # Apply CLI flag (overrides config file if set)
    if include_ranges:
        config.include_source_range = True

    extractor = SchemaExtractor(config)
    try:
        forest = extractor.extract_swc(program, comments)
    except ExtractionError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    if tree:
        click.echo(render_tree(forest.values()), nl=False)

    with open(output, "w") as f:
        f.write(forest_to_json(forest, config))
