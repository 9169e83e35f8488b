import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from linkhub.adapters.local_storage import create_local_store
from linkhub.app_shell.config import get_settings, load_configured_rules
from linkhub.components.notify import Notification
from linkhub.components.render import build_page_view
from linkhub.services.bootstrap import bootstrap_state
from linkhub.ui.context import LinkHubContext

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("cli")


class ConsoleNotificationSink:
    def show(self, notification: Notification) -> None:
        stream = sys.stderr if notification.kind == "error" else sys.stdout
        print(f"[{notification.kind}] {notification.message}", file=stream)


class PromptConfirm:
    """Confirms on the terminal unless --yes was given."""

    def __init__(self, assume_yes: bool = False) -> None:
        self.assume_yes = assume_yes

    def ask(self, message: str, on_answer: Callable[[bool], None]) -> None:
        if self.assume_yes:
            on_answer(True)
            return
        try:
            reply = input(f"{message} [y/N] ")
        except EOFError:
            reply = ""
        on_answer(reply.strip().lower() in ("y", "yes"))


def get_context(args: argparse.Namespace) -> LinkHubContext:
    rules = load_configured_rules(Path(args.rules) if args.rules else None)
    kv_store = create_local_store(args.data_dir, file_name=rules.storage.file_name)
    ctx = LinkHubContext.create(
        kv_store,
        rules,
        confirmer=PromptConfirm(assume_yes=getattr(args, "yes", False)),
        sinks=[ConsoleNotificationSink()],
    )
    bootstrap_state(ctx, seed_demo=False)
    return ctx


def _position(value: str) -> int:
    """1-based position as printed by `show`, converted to an index."""
    try:
        position = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not a position: {value}") from e
    if position < 1:
        raise argparse.ArgumentTypeError("positions start at 1")
    return position - 1


def _check_index(ctx: LinkHubContext, index: int) -> None:
    count = len(ctx.store.links)
    if not 0 <= index < count:
        logger.error(f"No link at position {index + 1} (there are {count}).")
        sys.exit(1)


def handle_show(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    view = build_page_view(ctx.store.state, ctx.rules.themes)
    print(view.profile.name)
    print(view.profile.bio)
    print(f"Avatar: {view.profile.image_url}")
    print(f"Theme: {view.theme}")
    print()
    if view.show_empty_state:
        print("No links yet.")
        return
    for link in view.links:
        print(f"{link.position + 1:>3}. {link.title} <{link.url}> [{link.icon}]")


def handle_add(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    if not ctx.controller.submit_link(args.title, args.url):
        sys.exit(1)


def handle_edit(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    _check_index(ctx, args.position)
    if not ctx.controller.edit_link_field(args.position, args.field, args.value):
        sys.exit(1)
    ctx.controller.finish_link_edit()
    print(f"Updated {args.field} of link {args.position + 1}.")


def handle_remove(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    _check_index(ctx, args.position)
    ctx.controller.request_remove_link(args.position)


def handle_move(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    _check_index(ctx, args.source)
    _check_index(ctx, args.target)
    if ctx.store.reorder_link(args.source, args.target):
        print(f"Moved link {args.source + 1} to position {args.target + 1}.")
    else:
        print("Nothing to move.")


def handle_theme(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    if ctx.rules.theme(args.tag) is None:
        known = ", ".join(t.tag for t in ctx.rules.themes)
        logger.warning(f"Theme '{args.tag}' is not configured (known: {known}).")
    ctx.controller.pick_theme(args.tag)
    print(f"Theme set to {args.tag}.")


def handle_profile(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    current = ctx.store.state.profile
    ctx.controller.save_profile(
        name=args.name if args.name is not None else current.name,
        bio=args.bio if args.bio is not None else current.bio,
        image_url=args.image if args.image is not None else current.image_url,
    )


def handle_export(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    target = ctx.controller.export_to(out_dir)
    if target is None:
        sys.exit(1)
    print(f"Backup written: {target}")


def handle_import(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    if not ctx.controller.import_path(args.file):
        sys.exit(1)


def handle_reset(ctx: LinkHubContext, args: argparse.Namespace) -> None:
    answer: list[bool] = []
    ctx.controller.confirmer.ask("Delete all stored data?", answer.append)
    if not answer or not answer[0]:
        print("Aborted.")
        return
    ctx.store.reset()
    print("Stored data cleared.")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="LinkHub CLI")
    parser.add_argument(
        "--data-dir", default=str(settings.data_dir), help="Directory holding stored data"
    )
    parser.add_argument("--rules", default=None, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # show
    subparsers.add_parser("show", help="Print profile and links")

    # add
    add_parser = subparsers.add_parser("add", help="Add a link")
    add_parser.add_argument("title")
    add_parser.add_argument("url")

    # edit
    edit_parser = subparsers.add_parser("edit", help="Change a link's title or URL")
    edit_parser.add_argument("position", type=_position)
    edit_parser.add_argument("field", choices=["title", "url"])
    edit_parser.add_argument("value")

    # remove
    remove_parser = subparsers.add_parser("remove", help="Remove a link")
    remove_parser.add_argument("position", type=_position)
    remove_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    # move
    move_parser = subparsers.add_parser("move", help="Move a link to another position")
    move_parser.add_argument("source", type=_position)
    move_parser.add_argument("target", type=_position)

    # theme
    theme_parser = subparsers.add_parser("theme", help="Select a theme")
    theme_parser.add_argument("tag")

    # profile
    profile_parser = subparsers.add_parser("profile", help="Update profile fields")
    profile_parser.add_argument("--name")
    profile_parser.add_argument("--bio")
    profile_parser.add_argument("--image", help="Avatar image URL")

    # export
    export_parser = subparsers.add_parser("export", help="Write a dated backup file")
    export_parser.add_argument("--out", default=".", help="Directory for the backup file")

    # import
    import_parser = subparsers.add_parser("import", help="Load a backup file")
    import_parser.add_argument("file")

    # reset
    reset_parser = subparsers.add_parser("reset", help="Delete all stored data")
    reset_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


HANDLERS: dict[str, Callable[[LinkHubContext, argparse.Namespace], None]] = {
    "show": handle_show,
    "add": handle_add,
    "edit": handle_edit,
    "remove": handle_remove,
    "move": handle_move,
    "theme": handle_theme,
    "profile": handle_profile,
    "export": handle_export,
    "import": handle_import,
    "reset": handle_reset,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    ctx = get_context(args)
    HANDLERS[args.command](ctx, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
