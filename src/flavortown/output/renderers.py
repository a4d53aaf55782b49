"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from flavortown.domain.items import NO_DESCRIPTION
from flavortown.domain.projects import UNKNOWN_DATE
from flavortown.output.console import create_console, get_output, style_for_stock

if TYPE_CHECKING:
    from rich.console import Console

    from flavortown.services.result import ServiceResult

# Columns added per nesting level in store listings.
INDENT_STEP = 6
DEVLOG_RULE = "─" * 40


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    entries = result.data.get("entries")
    if isinstance(entries, list):
        return "\n".join(str(entry["id"]) for entry in entries)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    console.print(Text.assemble(("OK", "ft.ok"), (f"  {result.op}", "ft.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    value_style = "ft.id" if key == "id" else ""
    console.print(Text.assemble((f"  {key}: ", "ft.key"), (str(value), value_style)))


def _stock_text(entry: dict[str, Any]) -> Text:
    state = str(entry.get("stock_state", "available"))
    return Text(str(entry.get("stock_display", "")), style=style_for_stock(state))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "ft.error"), (f"  {result.op}", "ft.op"), " — ", msg))

    if err and err.code == "NOT_AUTHENTICATED":
        console.print("  Run [ft.op]flavortown setup[/ft.op] to configure your API key.")
        console.print(
            "  You can get your API key by going to [bold]Settings[/bold] in Flavortown, "
            "generating it, and copying it."
        )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Store renderers ───────────────────────────────────────────────────


def _render_entry(console: Console, entry: dict[str, Any]) -> None:
    """Print one item block at its nesting depth."""
    prefix = " " * (int(entry.get("depth", 0)) * INDENT_STEP)
    body = prefix + "    "

    header = Text(prefix)
    header.append(str(entry["id"]).ljust(3), style="ft.id")
    header.append(" ")
    header.append(str(entry["name"]), style="ft.name")
    type_name = entry.get("display_type")
    if type_name:
        header.append(" ")
        header.append(f"[{type_name}]", style="ft.type")
    console.print(header)

    description = entry.get("description") or NO_DESCRIPTION
    console.print(Text(body) + Text(description, style="ft.description"))

    cost_line = Text(f"{body}Cost: ")
    cost_line.append(str(entry.get("cost_display", "N/A")), style="ft.cost")
    cost_line.append(" tickets | Stock: ")
    cost_line.append_text(_stock_text(entry))
    console.print(cost_line)

    if entry.get("limited"):
        console.print(Text(body) + Text("⚠ Limited Edition", style="ft.limited"))
    if entry.get("attached"):
        console.print(Text(body) + Text("↳ Upgrades/Options:", style="ft.attachments"))


def _render_store_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the item forest with attachments nested under their parents."""
    d = result.data
    reason = d.get("empty_reason")
    if reason == "no_items":
        console.print("[ft.warning]No store items found.[/ft.warning]")
        return
    if reason == "no_matches":
        console.print("[ft.warning]No items matched your filters.[/ft.warning]")
        return

    entries: list[dict[str, Any]] = d.get("entries", [])
    for index, entry in enumerate(entries):
        _render_entry(console, entry)
        is_last_in_block = index + 1 == len(entries) or entries[index + 1].get("depth", 0) == 0
        if is_last_in_block:
            console.print()

    roots = d.get("roots", len(entries))
    total = d.get("total", len(entries))
    if d.get("grouped"):
        summary = f"Showing {roots} top-level items ({len(entries)} including grouped options)"
    else:
        summary = f"Showing {len(entries)} items"
    console.print(Text(f"{summary}; {total} in store.", style="dim"))

    if verbose:
        console.print(Text(f"  sort: {d.get('sort')}  matched: {d.get('matched')}", style="dim"))


def _render_store_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single store item as a panel."""
    d = result.data
    lines: list[Text] = []
    if d.get("type"):
        lines.append(Text(f"Type: {d['type']}", style="ft.type"))

    description = d.get("long_description") or d.get("description")
    lines.append(Text(description or "No description available."))

    cost = Text("Cost: ")
    cost.append(str(d.get("cost_display", "N/A")), style="ft.cost")
    cost.append(" tickets")
    lines.append(cost)
    lines.append(Text("Stock: ") + _stock_text(d))

    if d.get("max_qty"):
        lines.append(Text(f"Max Qty: {d['max_qty']}"))
    if d.get("one_per_person_ever"):
        lines.append(Text("Limit: One per person ever", style="ft.limited"))
    if d.get("limited"):
        lines.append(Text("⚠ Limited Edition", style="ft.limited"))
    if d.get("image_url"):
        lines.append(Text("Image: ") + Text(str(d["image_url"]), style="ft.url"))

    content = Text("\n").join(lines)
    title = Text.assemble((str(d.get("id", "?")), "ft.id"), " — ", (str(d.get("name")), "ft.name"))
    console.print(Panel(content, title=title, border_style="green", expand=False))


# ── Project renderers ─────────────────────────────────────────────────


def _link_line(label: str, url: Any) -> Text:
    text = Text(f"{label}: ")
    if url:
        text.append(str(url), style="ft.url")
    else:
        text.append("N/A", style="dim")
    return text


def _render_project_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    entries: list[dict[str, Any]] = result.data.get("entries", [])
    if not entries:
        console.print("[ft.warning]No projects found.[/ft.warning]")
        return

    for entry in entries:
        console.print(
            Text.assemble(
                (str(entry["id"]).ljust(3), "ft.id"),
                " ",
                (str(entry["title"]), "ft.name"),
                (f" ({entry.get('date_display', UNKNOWN_DATE)})", "dim"),
            )
        )
        description = entry.get("description") or "No description"
        console.print(Text("    ") + Text(description, style="ft.description"))
        if entry.get("repo_url"):
            console.print(Text("    ") + _link_line("Repo", entry["repo_url"]))
        console.print()

    console.print(Text(f"Showing {len(entries)} projects.", style="dim"))
    if verbose:
        d = result.data
        console.print(Text(f"  page: {d.get('page')}  sort: {d.get('sort')}", style="dim"))


def _render_project_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(str(d.get("title", "")), style="ft.ok"))
    console.print(Text(d.get("description") or "No description", style="ft.description"))
    console.print()
    console.print(_link_line("Repo", d.get("repo_url")))
    console.print(_link_line("Demo", d.get("demo_url")))
    console.print(_link_line("Readme", d.get("readme_url")))
    if verbose:
        _field(console, "id", d.get("id"))
        _field(console, "created", d.get("date_display", UNKNOWN_DATE))


# ── Devlog renderers ──────────────────────────────────────────────────


def _reactions(entry: dict[str, Any], *, long: bool = False) -> str:
    likes = entry.get("likes_count", 0)
    comments = entry.get("comments_count", 0)
    if long:
        return f"❤ {likes} Likes | 💬 {comments} Comments"
    return f"❤ {likes} | 💬 {comments}"


def _render_devlog_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    entries: list[dict[str, Any]] = result.data.get("entries", [])
    if not entries:
        console.print("[ft.warning]No devlogs found for this project.[/ft.warning]")
        return

    for entry in entries:
        console.print(
            Text.assemble(
                (str(entry["id"]).ljust(3), "ft.id"),
                " ",
                (str(entry.get("date_display", UNKNOWN_DATE)), "dim"),
            )
        )
        console.print(Text("    ") + Text(str(entry.get("body", ""))))
        console.print(Text("    ") + Text(_reactions(entry), style="dim"))
        console.print()

    console.print(Text(f"Showing {len(entries)} devlogs.", style="dim"))


def _render_devlog_get(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    when = d.get("datetime_display", UNKNOWN_DATE)
    console.print(Text.assemble((f"Devlog #{d.get('id')}", "ft.name"), f" - {when}"))
    console.print(Text(DEVLOG_RULE, style="dim"))
    console.print(Text(str(d.get("body", ""))))
    console.print(Text(DEVLOG_RULE, style="dim"))
    console.print(_reactions(d, long=True))
    if d.get("duration_seconds") is not None:
        console.print(f"Duration: {d['duration_seconds']}s")
    if d.get("scrapbook_url"):
        console.print(Text("URL: ") + Text(str(d["scrapbook_url"]), style="ft.url"))


# ── Account renderers ─────────────────────────────────────────────────


def _render_setup(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print("[ft.ok]API key saved successfully![/ft.ok]")
    _field(console, "key", result.data.get("masked_key", ""))
    if verbose:
        _field(console, "path", result.data.get("path", ""))


def _render_whoami(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    if result.data.get("logged_in"):
        masked = str(result.data.get("masked_key", ""))
        console.print(Text.assemble(("Logged in with API Key: ", "ft.ok"), masked))
    else:
        console.print(
            '[ft.warning]Not logged in. Run "flavortown setup" to get started.[/ft.warning]'
        )


def _render_logout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print("[ft.ok]Logged out successfully. API key cleared.[/ft.ok]")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "store_list": _render_store_list,
    "store_get": _render_store_get,
    "project_list": _render_project_list,
    "project_get": _render_project_get,
    "devlog_list": _render_devlog_list,
    "devlog_get": _render_devlog_get,
    "setup": _render_setup,
    "whoami": _render_whoami,
    "logout": _render_logout,
}


def render_setup_instructions() -> str:
    """Instructions printed before the ``setup`` key prompt."""
    console = create_console()
    console.print("[ft.op]How to get your API key:[/ft.op]")
    console.print("1. Go to [bold]Settings[/bold] in Flavortown.")
    console.print('2. Click on "Generate API Key".')
    console.print("3. Copy the key and paste it below.")
    console.print(Rule(style="dim"))
    return get_output(console).rstrip("\n")
