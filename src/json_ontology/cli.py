"""Command-line interface for the JSON Ontology editor."""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .config import OntologyConfig
from .models import DocumentData
from .ontology import OntologyEditor
from .types import ProcessingError


def _config(ctx: click.Context, **config_overrides) -> OntologyConfig:
    settings = dict(ctx.obj)
    settings.update(config_overrides)
    return OntologyConfig(**settings)


def _load(ctx: click.Context, json_file: Path, source: Optional[Path],
          config: Optional[OntologyConfig] = None) -> Tuple[OntologyEditor, DocumentData]:
    editor = OntologyEditor(config or _config(ctx))
    try:
        json_text = json_file.read_text(encoding='utf-8')
        source_text = source.read_text(encoding='utf-8') if source else ""
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read input: {e}")

    try:
        doc = editor.load_document(json_file.stem, json_text, source_text)
    except ValueError as e:
        raise click.ClickException(str(e))
    return editor, doc


def _report_profile(editor: OntologyEditor) -> None:
    if editor.profiler is not None:
        click.echo(editor.profiler.export_metrics("summary"), err=True)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--profile', is_flag=True, help='Report timing and memory of each operation')
@click.pass_context
def main(ctx: click.Context, verbose: bool, profile: bool):
    """JSON Ontology - edit JSON as an outline and check it against a source text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"enable_profiling": profile}


@main.command()
@click.argument('json_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--source', '-s', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Source text file to match values against')
@click.option('--marker', '-m', default='#', show_default=True, help='Depth marker character')
@click.pass_context
def outline(ctx: click.Context, json_file: Path, source: Optional[Path], marker: str):
    """Print a JSON file as an indented outline."""
    try:
        config = _config(ctx, depth_marker=marker)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--marker")
    editor, doc = _load(ctx, json_file, source, config)

    for line in editor.render_outline(doc.flat_nodes):
        click.echo(line)
    _report_profile(editor)


@main.command()
@click.argument('json_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--source', '-s', required=True,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Source text file to match values against')
@click.pass_context
def check(ctx: click.Context, json_file: Path, source: Path):
    """List values that do not appear in the source text."""
    editor, doc = _load(ctx, json_file, source)
    stats = editor.analyze(doc)

    for index in stats.mismatched_indices:
        node = doc.flat_nodes[index]
        click.echo(f"❌ row {index} {node.key}: {node.value}")

    click.echo(f"📊 {stats.checked_rows - len(stats.mismatched_indices)}/{stats.checked_rows} "
               f"rows found in {source.name}")
    _report_profile(editor)

    if stats.mismatched_indices:
        ctx.exit(1)


@main.command()
@click.argument('json_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--restore-arrays', is_flag=True, help='Rebuild "[i]"-keyed objects as lists')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path')
@click.pass_context
def nest(ctx: click.Context, json_file: Path, restore_arrays: bool, output: Optional[Path]):
    """Flatten a JSON file to an outline and nest it back."""
    editor, doc = _load(ctx, json_file, None, _config(ctx, restore_arrays=restore_arrays))
    text = json.dumps(editor.nest(doc), indent=2, ensure_ascii=False)

    if output:
        try:
            output.write_text(text, encoding='utf-8')
        except OSError as e:
            raise click.ClickException(f"Cannot write {output}: {e}")
        click.echo(f"✅ Successfully wrote JSON to {output}")
    else:
        click.echo(text)
    _report_profile(editor)


@main.command()
@click.argument('json_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--source', '-s', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Source text file to match values against')
@click.option('--output', '-o', default='./output', show_default=True, help='Output directory')
@click.pass_context
def export(ctx: click.Context, json_file: Path, source: Optional[Path], output: str):
    """Write the nested ontology and a match report."""
    editor, doc = _load(ctx, json_file, source)
    try:
        written = editor.export(doc, output)
    except ProcessingError as e:
        response = editor.error_handler.handle_processing_error(e)
        raise click.ClickException(f"{e}. {response.suggested_action}")

    for info in written.values():
        click.echo(f"✅ Wrote {info['path']} ({info['size']} bytes)")
    _report_profile(editor)


@main.command()
@click.argument('json_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--source', '-s', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Source text file to match values against')
@click.pass_context
def stats(ctx: click.Context, json_file: Path, source: Optional[Path]):
    """Print outline statistics."""
    editor, doc = _load(ctx, json_file, source)
    summary = editor.analyze(doc)

    click.echo(f"Rows: {summary.total_rows} ({summary.container_rows} containers, {summary.leaf_rows} leaves)")
    click.echo(f"Max depth: {summary.max_depth}")
    click.echo(f"Match ratio: {summary.match_ratio:.0%}")
    _report_profile(editor)


if __name__ == '__main__':
    main()
