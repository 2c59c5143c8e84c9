#!/usr/bin/env python3
"""
Example usage of the JSON Ontology editor.

This script loads an extracted ontology next to the text it was extracted
from, edits a few rows, and shows the nested JSON and match flags.
"""

import json

from json_ontology import OntologyEditor, OntologyConfig, EditKind


def main():
    """Main example function."""
    print("JSON Ontology Example")
    print("=" * 50)

    source_text = (
        "Minutes of the board meeting held in Lisbon on 12 May 2024. "
        "Present: Ana Costa (chair), Rui Lopes, Marta Silva. "
        "The board approved the 2025 budget of 4.2 million EUR."
    )
    ontology = {
        "meeting": {
            "place": "Lisbon",
            "date": "12 May 2024",
        },
        "attendees": ["Ana Costa", "Rui Lopes", "Marta Silva"],
        "decisions": [
            {"topic": "budget", "amount": "4.2 million EUR"},
        ],
    }

    editor = OntologyEditor(OntologyConfig(restore_arrays=True))
    doc = editor.load_document("minutes", json.dumps(ontology), source_text)

    print("\n📋 Outline:")
    for line in editor.render_outline(doc.flat_nodes):
        print(f"   {line}")

    # Edit a value so it drifts from the source, then rename a key
    amount = next(node for node in doc.flat_nodes if node.key == "amount")
    doc = editor.edit(doc, amount.id, EditKind.VALUE, "4.5 million EUR")
    place = next(node for node in doc.flat_nodes if node.key == "place")
    doc = editor.edit(doc, place.id, EditKind.KEY, "city")

    print("\n✏️  After edits:")
    for line in editor.render_outline(doc.flat_nodes):
        print(f"   {line}")

    stats = editor.analyze(doc)
    print(f"\n📊 {stats.total_rows} rows, max depth {stats.max_depth}, "
          f"match ratio {stats.match_ratio:.0%}")

    snippet = editor.snippet(doc, place.id)
    if snippet:
        print(f"\n🔎 ...{snippet.before[-20:]}[{snippet.match}]{snippet.after[:20]}...")

    print("\n🧩 Nested JSON:")
    print(json.dumps(editor.nest(doc), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
