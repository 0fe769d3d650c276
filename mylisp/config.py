from __future__ import annotations
import os


_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_PROMPT = ">> "
_DEFAULT_REPEAT_TOKEN = "!!"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prompt() -> str:
    return str_from_env('MYLISP_PROMPT', _DEFAULT_PROMPT)


def get_repeat_token() -> str:
    # compared against stripped input, so surrounding blanks never matter
    return str_from_env('MYLISP_REPEAT_TOKEN', _DEFAULT_REPEAT_TOKEN).strip()


def trace_enabled() -> bool:
    return flag_from_env('MYLISP_TRACE')
