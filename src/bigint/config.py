from __future__ import annotations

import tomllib as toml
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bigint.runtime import APPLY
from bigint.utility import UserInputError
from bigint.workspace import seed_workspace, workspace_dir


@dataclass
class Settings:
    """
    Wrap the full TOML dict (without the [PROFILE] section).
    .as_dict() feeds runtime.apply().

      - name:        resolved profile name (FILE.stem if not provided in [PROFILE])
      - description: one-line description from [PROFILE] or "(no description)"
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- Paths -----------------------------------------------------------------

def _profiles_dir() -> Path:
    return workspace_dir() / "profiles"


def _profile_path(name: str) -> Path:
    return _profiles_dir() / f"{name}.toml"


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except (OSError, toml.TOMLDecodeError) as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", None) or getattr(e, "strerror", None) or str(e)
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


# --- Metadata handling -----------------------------------------------------


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _split_profile_data(raw: dict[str, Any], fallback_name: str) -> tuple[dict[str, Any], str, str]:
    """
    Extract [PROFILE] meta (name, description) and return:
      (settings_without_profile, resolved_name, resolved_description)
    """
    meta = raw.get("PROFILE") or {}
    data = {k: v for k, v in raw.items() if k != "PROFILE"}

    name = str(meta.get("name") or fallback_name)
    description = _sanitize_oneline(str(meta.get("description") or ""))

    return data, name, description


def _normalize(data: dict[str, Any], source: str) -> dict[str, Any]:
    """Type-check the keys the engine reads; everything else passes through."""
    beh = dict(data.get("BEHAVIOUR", {}) or {})
    if "DEBUG" in beh and not isinstance(beh["DEBUG"], bool):
        raise UserInputError(f"{source}: BEHAVIOUR.DEBUG must be true or false.")
    if "MAX_DIGITS" in beh:
        md = beh["MAX_DIGITS"]
        if isinstance(md, bool) or not isinstance(md, int) or md < 0:
            raise UserInputError(f"{source}: BEHAVIOUR.MAX_DIGITS must be a non-negative integer.")
        if md == 0:
            del beh["MAX_DIGITS"]

    fmt = dict(data.get("FORMATTING", {}) or {})
    for key in ("NUM_ABBR_HEAD", "NUM_ABBR_TAIL", "NUM_ABBR_THRESHOLD"):
        if key in fmt and (isinstance(fmt[key], bool) or not isinstance(fmt[key], int) or fmt[key] < 0):
            raise UserInputError(f"{source}: FORMATTING.{key} must be a non-negative integer.")

    data["BEHAVIOUR"] = beh
    data["FORMATTING"] = fmt
    return data


# --- Public API ------------------------------------------------------------


def list_all_profiles() -> list[str]:
    """
    Return the list of available profile *names* (filename stems).
    """
    seed_workspace(overwrite=False)
    pdir = _profiles_dir()
    if not pdir.exists():
        return []
    return sorted(p.stem for p in pdir.glob("*.toml"))


def list_profiles_with_descriptions() -> list[tuple[str, str]]:
    """
    Return [(name, description), ...] for all profiles.
    Profiles lacking [PROFILE] get "(no description)".
    """
    items: list[tuple[str, str]] = []
    for stem in list_all_profiles():
        p = _profile_path(stem)
        try:
            _, nm, desc = _split_profile_data(_load_toml(p), stem)
        except UserInputError:
            # Best-effort listing; fall back to filename
            nm, desc = stem, "(no description)"
        items.append((nm, desc))
    return sorted(items, key=lambda t: t[0].lower())


def has_profile(name: str) -> bool:
    return _profile_path(name).exists()


def load_settings_file(path: Path | str) -> Settings:
    """Load a profile from an explicit TOML path."""
    path = Path(path)
    if not path.is_file():
        raise UserInputError(f"Profile file {path} does not exist.")
    raw = _load_toml(path)
    data, resolved_name, description = _split_profile_data(raw, path.stem)
    return Settings(
        data=_normalize(data, path.name),
        name=resolved_name,
        description=description,
        _source=path,
    )


def load_settings(name: str | None = None) -> Settings:
    """
    Load a profile by name from <workspace>/profiles. With no name, use the
    profile recorded by write_current_profile(), else 'default'.
    """
    seed_workspace(overwrite=False)
    if not name:
        name = read_current_profile() or "default"

    path = _profile_path(name)
    if not path.exists():
        raise UserInputError(f"Profile '{name}' not found at {path}.")
    return load_settings_file(path)


def use_profile(name: str | None = None) -> Settings:
    """Load a profile and make it the active runtime configuration."""
    settings = load_settings(name)
    APPLY(settings)
    return settings


def _current_profile_path() -> Path:
    return _profiles_dir() / ".current"


def read_current_profile() -> str | None:
    try:
        s = _current_profile_path().read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return s[:-5] if s.lower().endswith(".toml") else (s or None)


def write_current_profile(name: str) -> None:
    nm = (name or "").strip()
    if nm.lower().endswith(".toml"):
        nm = nm[:-5]
    p = _current_profile_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(nm, encoding="utf-8")
