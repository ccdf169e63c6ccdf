import argparse
from pathlib import Path

from littlesearch.viewer import app

parser = argparse.ArgumentParser(description="Little Search: browser search page")
parser.add_argument("--docs", required=True, help="File listing document paths")
parser.add_argument("--noise-words", required=True, help="File of noise words to skip")
parser.add_argument("--base-dir", default=None, help="Resolve relative document paths")
parser.add_argument("--port", type=int, default=5000)
parser.add_argument("--no-browser", action="store_true")
args = parser.parse_args()

app.main(
    Path(args.docs),
    Path(args.noise_words),
    base_dir=Path(args.base_dir) if args.base_dir else None,
    port=args.port,
    open_browser=not args.no_browser,
)
