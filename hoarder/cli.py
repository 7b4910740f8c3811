"""
Command line entry point: resolve a link, tag a title, or serve the JSON API.
"""
from __future__ import annotations

import json

import click

from hoarder.app import configure_logging, create_app
from hoarder.config_loader import load_tag_vocabulary
from hoarder.models import PageMetadata, Platform
from hoarder.resolver import MetadataResolver
from hoarder.settings import load_settings
from hoarder.tagging import generate_tags


@click.group()
@click.option("--log-level", default=None, help="Overrides HOARDER_LOG_LEVEL.")
@click.pass_context
def cli(ctx, log_level):
    settings = load_settings()
    if log_level:
        settings.log_level = log_level.upper()
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument("url")
@click.option("--title", default=None, help="In-page title, takes priority over fetched metadata.")
@click.option("--description", default=None)
@click.option("--image", default=None)
@click.pass_obj
def resolve(settings, url: str, title, description, image):
    page = PageMetadata(title=title, description=description, image_url=image)
    with MetadataResolver(settings=settings) as resolver:
        metadata = resolver.resolve(url, page=None if page.is_empty else page)
    tags = generate_tags(
        metadata.title,
        metadata.description,
        metadata.platform,
        vocabulary=load_tag_vocabulary(settings.tags_config_path),
        limit=settings.max_tags,
    )
    payload = metadata.to_dict()
    payload["tags"] = tags
    click.echo(json.dumps(payload, ensure_ascii=False))


@cli.command()
@click.argument("title")
@click.option("--description", default=None)
@click.option("--platform", type=click.Choice([p.value for p in Platform]), default=None)
@click.pass_obj
def tags(settings, title: str, description, platform):
    result = generate_tags(
        title,
        description,
        platform,
        vocabulary=load_tag_vocabulary(settings.tags_config_path),
        limit=settings.max_tags,
    )
    click.echo(json.dumps(result, ensure_ascii=False))


@cli.command()
@click.option("--host", default="127.0.0.1")
@click.option("--port", default=5000, type=int)
@click.option("--debug", is_flag=True, default=False)
@click.pass_obj
def serve(settings, host: str, port: int, debug: bool):
    app = create_app(settings)
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":  # pragma: no cover
    cli()
