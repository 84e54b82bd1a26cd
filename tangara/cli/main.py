import importlib, logging
from pathlib import Path

import click

from tangara.config import get_default_config
from tangara.errors import DiagnosticKind, InvocationError, SourceDiagnostic
from tangara.pipeline import CompilationPipeline
from tangara.reporting import DiagnosticReporter, kind_label


def _input_path(value):
    if value is None:
        raise InvocationError("missing required flag --input")
    path = Path(value)
    if not path.is_file():
        raise InvocationError(f"input file not found: {value}")
    return path


def _load_stage(spec):
    """Resolve a 'module:function' spec to a callable."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name.strip() or not attr.strip() or ":" in attr:
        raise InvocationError(
            f"invalid stage '{spec}'. Expected 'module:function'"
        )
    try:
        module = importlib.import_module(module_name.strip())
    except ImportError as e:
        raise InvocationError(f"cannot import stage module '{module_name}': {e}") from e
    stage = getattr(module, attr.strip(), None)
    if not callable(stage):
        raise InvocationError(f"stage '{spec}' is not a callable in '{module_name}'")
    return stage


def _read_source(path):
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvocationError(f"cannot read input file {path}: {e}") from e


def _build_pipeline(stages):
    pipeline = CompilationPipeline()
    for spec in stages:
        stage = _load_stage(spec)
        name = spec.strip()
        if name in pipeline.stages:
            raise InvocationError(f"stage '{name}' given more than once")
        pipeline.register(name, stage)
    return pipeline


@click.group()
def cli():
    config = get_default_config()
    logging.basicConfig(
        level=config.log_level_number,
        format="%(levelname)s %(name)s: %(message)s"
    )


@cli.command()
@click.option("--input", "input_path", default=None, help="Source file to compile")
@click.option(
    "--stage",
    "stages",
    multiple=True,
    help="Compilation stage as 'module:function', in run order (repeatable)"
)
@click.pass_context
def check(ctx, input_path, stages):
    """
    Run compilation stages over a source file and report the first diagnostic.

    \b
    Examples:
      tangara check --input main.tg --stage mylang.lexer:tokenize --stage mylang.parser:parse

    \b
    Exit codes:
      0  - no diagnostics
      1  - source diagnostic (TANGARA_SOURCE_EXIT_CODE)
      2  - invalid invocation (TANGARA_INVOCATION_EXIT_CODE)
    """
    reporter = DiagnosticReporter(get_default_config())

    try:
        path = _input_path(input_path)
        pipeline = _build_pipeline(stages)
        source = _read_source(path)
    except InvocationError as err:
        ctx.exit(reporter.report_invocation(err))

    try:
        pipeline.run(source)
    except SourceDiagnostic as diag:
        ctx.exit(reporter.report(diag))
    click.echo("OK")


@cli.command()
def kinds():
    """List diagnostic kinds."""
    for kind in DiagnosticKind:
        click.echo(f"{kind.value:<8} {kind_label(kind)}")


@cli.command()
def config():
    """Show the active configuration."""
    click.echo(get_default_config().get_summary())


if __name__ == "__main__":
    cli()
