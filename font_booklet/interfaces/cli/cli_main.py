import argparse
import os
import sys

from ...core.app import CoreApp
from ...utils.logging import setup_logging


def _ensure_gui_app():
    """The Qt font database needs a QGuiApplication; run it headless."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([sys.argv[0]])
    return app


def build_parser():
    parser = argparse.ArgumentParser(description="Font Booklet: browse and bookmark font faces")
    parser.add_argument("--config", default="config/settings.json", help="Path to settings.json")
    parser.add_argument("--log-level", help="Override the configured log level")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List faces with their bookmark status")
    p_list.add_argument("--bookmarked", action="store_true", help="Only bookmarked faces")

    p_families = sub.add_parser("families", help="List families and their faces")
    p_families.add_argument("--bookmarked", action="store_true", help="Only bookmarked faces")

    p_bookmark = sub.add_parser("bookmark", help="Toggle the bookmark of a face")
    p_bookmark.add_argument("face", help="Face name as shown by 'list'")

    p_sample = sub.add_parser("sample", help="Show or set the sample text")
    p_sample.add_argument("text", nargs="?", help="New sample text (empty restores the default)")

    sub.add_parser("pangram", help="Replace the sample text with a random pangram")
    return parser


def run(argv=None, catalog=None):
    args = build_parser().parse_args(argv)

    # 1. Initialize App
    try:
        app = CoreApp(args.config, catalog=catalog)
    except Exception as e:
        print(f"Initialization Error: {e}")
        sys.exit(1)

    setup_logging(args.log_level or app.settings.log_level)

    # 2. Catalog (only the commands that need it)
    if args.command in ("list", "families", "bookmark") and catalog is None:
        gui_app = _ensure_gui_app() # keep alive while the catalog loads
        app.load_catalog()

    if args.command == "list":
        df = app.visible_faces(filtering=args.bookmarked)
        if df.empty:
            print("No faces to show.")
            return 0
        for row in df.itertuples(index=False):
            mark = "*" if app.is_bookmarked(row.face) else " "
            print(f"{mark} {row.face}")
        return 0

    if args.command == "families":
        families = app.visible_families(filtering=args.bookmarked)
        if not families:
            print("No families to show.")
            return 0
        for family in families:
            print(family.surname)
            for member in family.members:
                print(f"    {member}")
        return 0

    if args.command == "bookmark":
        if args.face not in app.catalog:
            print(f"Unknown face: {args.face}")
            sys.exit(2)
        status = app.toggle_bookmark(args.face)
        print(f"{'Bookmarked' if status else 'Removed bookmark'}: {args.face}")
        return 0

    if args.command == "sample":
        if args.text is not None:
            app.commit_sample_text(args.text)
        print(app.sample_text)
        return 0

    if args.command == "pangram":
        print(app.random_pangram())
        return 0

    return 0

if __name__ == "__main__":
    sys.exit(run())
