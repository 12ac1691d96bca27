"""Toast notices carried in an explicit per-session mapping.

Pages push a notice before st.rerun(); the next run drains and shows them.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

NOTICE_KINDS = ("success", "error", "info", "warning")
_KEY = "notices"


@dataclass(frozen=True)
class Notice:
    kind: str  # One of NOTICE_KINDS
    title: str
    description: str = ""


def push_notice(
    state: MutableMapping[str, Any], kind: str, title: str, description: str = ""
) -> Notice:
    if kind not in NOTICE_KINDS:
        raise ValueError(f"Unknown notice kind: {kind}")
    notice = Notice(kind=kind, title=title, description=description)
    state.setdefault(_KEY, []).append(notice)
    return notice


def drain_notices(state: MutableMapping[str, Any]) -> list[Notice]:
    notices = list(state.get(_KEY) or [])
    state[_KEY] = []
    return notices
