"""
Draft Store — In-progress assessments saved per organization.

Drafts are stored in:
    ~/.cci_calculator/drafts.json

Each draft holds the organization name, the parameter values entered so far
and the time it was last saved. Users can stop mid-assessment and resume
later with `--draft <organization>` on the CLI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from .config import DRAFTS_DIR, DRAFTS_FILE_NAME
from .scoring.models import Parameter

logger = logging.getLogger("cci_calculator.drafts")


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass
class AssessmentDraft:
    """A single organization's saved, possibly incomplete, assessment."""
    organization: str                  # Key; lookups are case-insensitive
    parameters: list[Parameter] = field(default_factory=list)
    saved_at: str = ""                 # ISO-8601 UTC
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "parameters": [p.to_dict() for p in self.parameters],
            "saved_at": self.saved_at,
            "notes": self.notes,
        }


@dataclass
class DraftStore:
    """Manages the collection of drafts on disk."""
    path: Path = field(default_factory=lambda: DRAFTS_DIR / DRAFTS_FILE_NAME)
    drafts: dict[str, AssessmentDraft] = field(default_factory=dict)

    # --- Persistence ---

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "DraftStore":
        """Load drafts from disk. Returns an empty store if the file doesn't exist."""
        store = cls(path=path) if path else cls()
        if not store.path.exists():
            return store
        try:
            data = json.loads(store.path.read_text(encoding="utf-8"))
            for organization, ddata in data.get("drafts", {}).items():
                store.drafts[organization] = AssessmentDraft(
                    organization=organization,
                    parameters=[Parameter.from_dict(p) for p in ddata.get("parameters", [])],
                    saved_at=ddata.get("saved_at", ""),
                    notes=ddata.get("notes", ""),
                )
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to parse {store.path}: {e}")
            store.drafts = {}
        return store

    def save(self) -> None:
        """Persist drafts to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "drafts": {
                organization: draft.to_dict()
                for organization, draft in self.drafts.items()
            },
        }
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug(f"Saved {len(self.drafts)} drafts to {self.path}")

    # --- CRUD ---

    def _key(self, organization: str) -> Optional[str]:
        wanted = organization.lower()
        for name in self.drafts:
            if name.lower() == wanted:
                return name
        return None

    def put(
        self,
        organization: str,
        parameters: Sequence[Parameter],
        notes: str = "",
    ) -> AssessmentDraft:
        """Add or overwrite the draft for an organization."""
        existing = self._key(organization)
        if existing and existing != organization:
            del self.drafts[existing]
        draft = AssessmentDraft(
            organization=organization,
            parameters=list(parameters),
            saved_at=datetime.now(timezone.utc).isoformat(),
            notes=notes,
        )
        self.drafts[organization] = draft
        self.save()
        return draft

    def remove(self, organization: str) -> bool:
        """Remove a draft. Returns True if it existed."""
        key = self._key(organization)
        if key is None:
            return False
        del self.drafts[key]
        self.save()
        return True

    def get(self, organization: str) -> Optional[AssessmentDraft]:
        """Get a draft by organization name (case-insensitive)."""
        key = self._key(organization)
        return self.drafts.get(key) if key else None

    def list_drafts(self) -> list[AssessmentDraft]:
        """Return all drafts sorted by organization name."""
        return sorted(self.drafts.values(), key=lambda d: d.organization.lower())
