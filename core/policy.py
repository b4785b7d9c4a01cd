# core/policy.py
from __future__ import annotations
from typing import Set, Dict, Any, Callable, Iterable, Optional
import functools
import streamlit as st

# Page name -> action -> roles. An empty/missing "view" entry means anyone may view.
PAGE_ACCESS: Dict[str, Dict[str, Set[str]]] = {
    "Login":     {"view": {"public"}},
    "Logout":    {"view": {"public"}},
    "Education": {"view": {"student"}, "edit": {"student"}},
}

def current_user() -> Dict[str, Any]:
    return st.session_state.get("user") or {}

def user_roles() -> Set[str]:
    roles = current_user().get("roles")
    return set(roles) if roles else {"public"}

def _allowed(page_name: str, action: str, roles: Iterable[str]) -> Optional[bool]:
    """None when the page has no rule for this action."""
    rules = PAGE_ACCESS.get(page_name) or {}
    allowed = set(rules.get(action) or [])
    if not allowed:
        return None
    return bool(set(roles) & allowed)

def can_view_page(page_name: str, roles: Iterable[str]) -> bool:
    verdict = _allowed(page_name, "view", roles)
    return True if verdict is None else verdict

def can_edit_page(page_name: str, roles: Iterable[str]) -> bool:
    return bool(_allowed(page_name, "edit", roles))

def require_page(page_name: str):
    def _wrap(fn: Callable):
        @functools.wraps(fn)
        def _inner(*args, **kwargs):
            if not can_view_page(page_name, user_roles()):
                st.error("Access Denied. You don't have permission to view this page.")
                st.stop()
            return fn(*args, **kwargs)
        return _inner
    return _wrap
