"""Flask search page over a built index.

Usage:
    python -m littlesearch.viewer --docs docs.txt --noise-words noisewords.txt
"""

from pathlib import Path
import threading
import webbrowser

from flask import Flask, jsonify, render_template_string, request

from littlesearch.build_index import build_index
from littlesearch.data_models.occurrence_index import OccurrenceIndex
from littlesearch.search import run_query

app = Flask(__name__)

_index: OccurrenceIndex | None = None


SEARCH_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Little Search</title></head>
<body>
<h1>Little Search</h1>
<form action="/" method="get">
  <input name="kw1" value="{{ kw1 }}"> or <input name="kw2" value="{{ kw2 }}">
  <button type="submit">Search</button>
</form>
{% if result is not none %}
  {% if result.documents is none %}
  <p>No result for <em>{{ kw1 }}</em> or <em>{{ kw2 }}</em>.</p>
  {% else %}
  <ol>
  {% for doc in result.documents %}
    <li>{{ doc }}</li>
  {% endfor %}
  </ol>
  {% endif %}
{% endif %}
<p>{{ n_docs }} documents, {{ n_keywords }} keywords indexed.</p>
</body>
</html>
"""


@app.get("/")
def index():
    assert _index is not None
    kw1 = request.args.get("kw1", "")
    kw2 = request.args.get("kw2", "")
    result = run_query(_index, kw1, kw2) if kw1 or kw2 else None
    return render_template_string(
        SEARCH_TEMPLATE,
        kw1=kw1,
        kw2=kw2,
        result=result,
        n_docs=len(_index.doc_ids()),
        n_keywords=len(_index),
    )


@app.get("/api/search")
def search():
    assert _index is not None
    result = run_query(_index, request.args.get("kw1"), request.args.get("kw2"))
    return jsonify(result.model_dump())


def main(
    docs: Path,
    noise_words: Path,
    base_dir: Path | None = None,
    port: int = 5000,
    open_browser: bool = True,
) -> None:
    global _index
    _index = build_index(docs, noise_words, base_dir=base_dir)
    print(f"Indexed {len(_index.doc_ids())} docs, {len(_index)} keywords")
    if open_browser:
        threading.Timer(1.0, webbrowser.open, [f"http://localhost:{port}"]).start()
    app.run(host="localhost", port=port, debug=False)
