"""Dictionary lookup web application — Flask backend."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from src.constants import DATA_DIR
from src.dictionary import Dictionary, InvalidWordError, load_default_dictionary

app = Flask(__name__)

# Load dictionary once at startup
try:
    DICTIONARY = load_default_dictionary()
except FileNotFoundError as e:
    print(f"{e} Starting with an empty dictionary.")
    DICTIONARY = Dictionary()


def _arg(name: str) -> str:
    return request.args.get(name, "").strip().lower()


@app.route("/")
def index():
    return jsonify({"word_count": DICTIONARY.word_count})


@app.route("/lookup")
def lookup():
    word = _arg("word")
    if not word:
        return jsonify({"error": "No word provided"}), 400
    meaning = DICTIONARY.lookup(word)
    if meaning is None:
        return jsonify({"error": f"Word '{word}' not found"}), 404
    return jsonify({"word": word, "meaning": meaning})


@app.route("/prefix")
def prefix():
    prefix = _arg("prefix")
    try:
        limit = int(request.args.get("limit", 100))
    except ValueError:
        return jsonify({"error": "limit must be an integer"}), 400
    if limit < 1:
        return jsonify({"error": "limit must be positive"}), 400
    if not DICTIONARY.has_prefix(prefix):
        return jsonify({"error": f"No words found with prefix '{prefix}'"}), 404

    matches = []
    truncated = False
    for word, meaning in DICTIONARY.prefix_search(prefix):
        if len(matches) >= limit:
            truncated = True
            break
        matches.append({"word": word, "meaning": meaning})
    return jsonify({"prefix": prefix, "matches": matches, "truncated": truncated})


@app.route("/words", methods=["POST"])
def add_word():
    data = request.get_json(silent=True) or {}
    word = str(data.get("word", "")).strip().lower()
    meaning = str(data.get("meaning", ""))
    try:
        DICTIONARY.insert(word, meaning)
    except InvalidWordError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"word": word, "meaning": meaning}), 201


@app.route("/load", methods=["POST"])
def load():
    data = request.get_json(silent=True) or {}
    path = str(data.get("path", "")).strip()
    if not path:
        return jsonify({"error": "No path provided"}), 400
    # Only files under the data directory; relative paths resolve against it
    data_dir = DATA_DIR.resolve()
    target = (data_dir / path).resolve()
    if not target.is_relative_to(data_dir):
        return jsonify({"error": "Path must be inside the data directory"}), 403
    try:
        loaded = DICTIONARY.load(target)
    except OSError as e:
        return jsonify({"error": f"Could not load dictionary: {e}"}), 400
    return jsonify({"loaded": loaded, "word_count": DICTIONARY.word_count})


if __name__ == "__main__":
    print(f"Dictionary loaded: {DICTIONARY.word_count} words")
    app.run(debug=True, host="127.0.0.1", port=8080)
