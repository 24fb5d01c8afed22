"""A JSON file holding one collection of documents.

Each repository owns one collection and maps its raw dicts to domain
objects. Documents are keyed by a string ``id``.
"""

from __future__ import annotations

import json
from pathlib import Path


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def next_id(self) -> str:
        ids = [int(doc["id"]) for doc in self.load() if str(doc["id"]).isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def find(self, doc_id: str) -> dict | None:
        for doc in self.load():
            if doc["id"] == doc_id:
                return doc
        return None

    def find_first(self, **criteria: object) -> dict | None:
        for doc in self.load():
            if all(doc.get(k) == v for k, v in criteria.items()):
                return doc
        return None

    def upsert(self, document: dict) -> None:
        """Replace the document with the same id, or append it."""
        docs = self.load()
        for i, doc in enumerate(docs):
            if doc["id"] == document["id"]:
                docs[i] = document
                break
        else:
            docs.append(document)
        self.persist(docs)

    def remove(self, doc_id: str) -> None:
        docs = self.load()
        remaining = [doc for doc in docs if doc["id"] != doc_id]
        if len(remaining) != len(docs):
            self.persist(remaining)

    # --- File helpers ---------------------------------------------------------

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, docs: list[dict]) -> None:
        self._file_path.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
