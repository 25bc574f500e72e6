from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tagpages.core.config import TagPagesConfig
from tagpages.core.config_loader import ConfigLoader
from tagpages.core.exceptions import TagPagesError
from tagpages.core.generator import PageSetGenerator
from tagpages.core.logging import get_logger, setup_logging
from tagpages.core.types import PageDescriptor
from tagpages.infra.adapters.posts import MarkdownPostsAdapter
from tagpages.infra.paths import output_path
from tagpages.infra.sinks.site import SiteOutputSink, TagPageRenderer

app = typer.Typer(name="tagpages", help="Generate tag index pages, with or without pagination.")

console = Console()
logger = get_logger(__name__)

SiteRootArgument = typer.Argument(Path("."), help="Root directory of the site.")
PerPageOption = typer.Option(None, "--per-page", help="Items per page (implies --paginate).")
PaginateOption = typer.Option(None, "--paginate/--no-paginate", help="Override the pagination switch.")
OutputDirOption = typer.Option(None, "--output-dir", help="Override the generated site directory.")
LogLevelOption = typer.Option("WARNING", "--log-level", help="Logging level.")


def _load_config(loader: ConfigLoader, per_page: int | None, paginate: bool | None) -> TagPagesConfig:
    config = loader.load()
    update = {}
    if per_page is not None:
        update["per_page"] = per_page
        update["enabled"] = True
    if paginate is not None:
        update["enabled"] = paginate
    if update:
        config = config.model_copy(update={"pagination": config.pagination.model_copy(update=update)})
    return config


def _generate(config: TagPagesConfig) -> list[PageDescriptor]:
    items = MarkdownPostsAdapter(config.paths.abs_posts_dir).load()
    return PageSetGenerator(config).generate(items)


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/] {exc}")
    return typer.Exit(code=1)


@app.command()
def plan(
    site_root: Path = SiteRootArgument,
    per_page: int | None = PerPageOption,
    paginate: bool | None = PaginateOption,
    log_level: str = LogLevelOption,
):
    """
    Show the tag pages that would be generated, without writing anything.
    """
    setup_logging(log_level)
    try:
        config = _load_config(ConfigLoader(site_root.resolve()), per_page, paginate)
        descriptors = _generate(config)
    except TagPagesError as exc:
        raise _fail(exc) from exc

    if not descriptors:
        console.print("No tags found.")
        return

    table = Table(title="Tag pages")
    table.add_column("Tag", style="bold cyan")
    table.add_column("Page", justify="right")
    table.add_column("Path")
    table.add_column("Items", justify="right")
    table.add_column("Previous")
    table.add_column("Next")

    for descriptor in descriptors:
        paginator = descriptor.paginator
        table.add_row(
            descriptor.tag,
            str(descriptor.page),
            str(output_path(descriptor, config.tags.path)),
            f"{len(descriptor.items)}/{descriptor.total_posts}",
            (paginator.previous_page_path or "-") if paginator else "-",
            (paginator.next_page_path or "-") if paginator else "-",
        )

    console.print(table)


@app.command()
def build(
    site_root: Path = SiteRootArgument,
    per_page: int | None = PerPageOption,
    paginate: bool | None = PaginateOption,
    output_dir: Path | None = OutputDirOption,
    log_level: str = LogLevelOption,
):
    """
    Render every tag page with the tag layout and write it into the site.
    """
    setup_logging(log_level)
    try:
        loader = ConfigLoader(site_root.resolve())
        config = _load_config(loader, per_page, paginate)
        descriptors = _generate(config)
        renderer = TagPageRenderer(
            config.paths.abs_layouts_dir, site=loader.site_data(), tag_path=config.tags.path
        )
        sink = SiteOutputSink(output_dir or config.paths.abs_output_dir, renderer)
        written = sink.publish(descriptors)
    except TagPagesError as exc:
        raise _fail(exc) from exc
    except OSError as exc:
        logger.exception("Failed to write tag pages")
        raise _fail(exc) from exc

    tags = {descriptor.tag for descriptor in descriptors}
    console.print(f"[bold green]Wrote {len(written)} pages for {len(tags)} tags.[/bold green]")


if __name__ == "__main__":
    app()
