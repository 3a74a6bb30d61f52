import json
from importlib.metadata import PackageNotFoundError, version as package_version
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from bundlepack.comment import identifier_comment, render_comment_body
from bundlepack.diff import BundleComparison, compare_bundle_stats
from bundlepack.github import (
    DEFAULT_API_URL,
    DEFAULT_BOT_LOGIN,
    GitHubClient,
    GitHubContextError,
    GitHubError,
    load_pull_request_context,
    sync_pull_request_comment,
)
from bundlepack.stats import StatsError, read_stats_file

app = typer.Typer(help="BundleKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("bundlekit")
    except PackageNotFoundError:
        from bundlekit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


def _resolve_setting(explicit: str | None, env_name: str) -> str | None:
    if explicit and explicit.strip():
        return explicit.strip()
    value = os.getenv(env_name)
    if value and value.strip():
        return value.strip()
    return None


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show BundleKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(
    command: str,
    error: Exception,
    *,
    json_output: bool,
    base: Path,
    current: Path,
) -> typer.Exit:
    message = f"{command} failed: {error}"
    if json_output:
        _echo_json(
            {
                "status": "error",
                "exit_code": 1,
                "message": message,
                "base_path": str(base),
                "current_path": str(current),
            }
        )
    else:
        _echo(message, err=True)
    return typer.Exit(code=1)


def _load_comparison(base: Path, current: Path) -> BundleComparison:
    return compare_bundle_stats(read_stats_file(base), read_stats_file(current))


@app.command()
def diff(
    base: Path = typer.Argument(..., help="Path to the base build stats JSON."),
    current: Path = typer.Argument(..., help="Path to the current build stats JSON."),
    title: str = typer.Option(
        "",
        "--title",
        help="Title appended to the comment heading and used as comment key.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Compare two stats files and print the markdown size report."""
    try:
        comparison = _load_comparison(base, current)
    except StatsError as error:
        raise _fail("diff", error, json_output=json_output, base=base, current=current) from error

    body = render_comment_body(comparison, title)
    if json_output:
        _echo_json(
            {
                **comparison.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "body": body,
                "base_path": str(base),
                "current_path": str(current),
            }
        )
        return

    _echo(body)


@app.command()
def comment(
    base: Path = typer.Argument(..., help="Path to the base build stats JSON."),
    current: Path = typer.Argument(..., help="Path to the current build stats JSON."),
    title: str = typer.Option(
        "",
        "--title",
        help="Title appended to the comment heading and used as comment key.",
    ),
    github_token: str | None = typer.Option(
        None,
        "--github-token",
        help="GitHub token (defaults to GITHUB_TOKEN).",
    ),
    repository: str | None = typer.Option(
        None,
        "--repository",
        help="Repository as owner/name (defaults to GITHUB_REPOSITORY).",
    ),
    event_name: str | None = typer.Option(
        None,
        "--event-name",
        help="Workflow event name (defaults to GITHUB_EVENT_NAME).",
    ),
    event_path: Path | None = typer.Option(
        None,
        "--event-path",
        help="Workflow event payload path (defaults to GITHUB_EVENT_PATH).",
    ),
    api_url: str | None = typer.Option(
        None,
        "--api-url",
        help="GitHub REST API base URL (defaults to GITHUB_API_URL).",
    ),
    bot_login: str = typer.Option(
        DEFAULT_BOT_LOGIN,
        "--bot-login",
        help="Login of the account that owns previously posted comments.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable sync output.",
    ),
) -> None:
    """Post or update the bundle size comment on the current pull request."""
    try:
        token = _resolve_setting(github_token, "GITHUB_TOKEN")
        if token is None:
            raise GitHubContextError(
                "GitHub token is required (pass --github-token or set GITHUB_TOKEN)"
            )
        context = load_pull_request_context(
            event_name=_resolve_setting(event_name, "GITHUB_EVENT_NAME"),
            event_path=_resolve_setting(
                str(event_path) if event_path is not None else None,
                "GITHUB_EVENT_PATH",
            ),
            repository=_resolve_setting(repository, "GITHUB_REPOSITORY"),
        )
        comparison = _load_comparison(base, current)
        body = render_comment_body(comparison, title)
        client = GitHubClient(
            token,
            api_url=_resolve_setting(api_url, "GITHUB_API_URL") or DEFAULT_API_URL,
        )
        result = sync_pull_request_comment(
            client,
            context,
            body=body,
            identifier=identifier_comment(title),
            bot_login=bot_login,
        )
    except (StatsError, GitHubError) as error:
        raise _fail(
            "comment",
            error,
            json_output=json_output,
            base=base,
            current=current,
        ) from error

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": f"comment {result.action}",
                "pull_request": context.to_dict(),
                "base_path": str(base),
                "current_path": str(current),
            }
        )
        return

    _echo(f"comment {result.action}: #{context.number} comment_id={result.comment_id}")
    if result.deleted_comment_ids:
        deleted = ",".join(str(comment_id) for comment_id in result.deleted_comment_ids)
        _echo(f"deleted duplicate comments: {deleted}")


def main() -> None:
    app()
