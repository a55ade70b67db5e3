"""Learned model parameters and their process-wide cache.

The only learned figure is the per-street bluff success rate. The blob
looks like::

    {"bluff_success_rates": {"flop": {"succ": 31, "total": 52}, ...}}

optionally wrapped in ``{"params": ...}``. Anything malformed is logged
and ignored so the engine keeps its baseline rates.

The cache is filled at most once per process: the first call to
``load_model_params_once`` marks the load as attempted whether or not it
succeeds, and later calls return whatever that first call produced.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from poker_assist.utils.constants import Street

logger = logging.getLogger("poker_assist.advisor")

DEFAULT_PARAMS_PATH = Path.home() / ".poker_assist" / "model_params.json"


@dataclass(frozen=True)
class ModelParams:
    """Parsed learned parameters.

    ``bluff_success_rates`` maps street to (successes, total attempts).
    """

    bluff_success_rates: Mapping[Street, tuple[int, int]] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, data: Any) -> ModelParams:
        """Parse a raw parameter blob, skipping anything malformed."""
        if isinstance(data, Mapping) and "params" in data:
            data = data["params"]
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            logger.warning("Model params must be a JSON object, got %s", type(data).__name__)
            return cls()

        rates = data.get("bluff_success_rates")
        if rates is None:
            return cls()
        if not isinstance(rates, Mapping):
            logger.warning("bluff_success_rates must be an object, got %s", type(rates).__name__)
            return cls()

        parsed: dict[Street, tuple[int, int]] = {}
        for key, entry in rates.items():
            try:
                street = Street(str(key))
            except ValueError:
                logger.warning("Ignoring bluff rate for unknown street %r", key)
                continue
            try:
                successes = int(entry["succ"])
                total = int(entry["total"])
            except (KeyError, TypeError, ValueError):
                logger.warning("Ignoring malformed bluff rate for %s: %r", street, entry)
                continue
            if total < 0 or not 0 <= successes <= total:
                logger.warning(
                    "Ignoring inconsistent bluff rate for %s: %d/%d", street, successes, total,
                )
                continue
            parsed[street] = (successes, total)

        return cls(bluff_success_rates=parsed)


# Process-wide cache
_attempted = False
_params: ModelParams | None = None


def load_model_params_once(
    fetcher: Callable[[], Mapping[str, Any] | None] | None,
) -> ModelParams | None:
    """Populate the cache from ``fetcher`` on first use.

    A fetcher that raises is logged at WARNING and counts as the one
    attempt; the cache then stays empty for the rest of the process.
    """
    global _attempted, _params

    if _attempted or fetcher is None:
        return _params
    _attempted = True

    try:
        raw = fetcher()
    except Exception as e:
        logger.warning("Model params fetch failed, using baseline rates: %s", e)
        return None

    if raw is None:
        logger.debug("Model params fetcher returned nothing")
        return None
    _params = ModelParams.from_dict(raw)
    logger.info(
        "Loaded learned bluff rates for %d street(s)", len(_params.bluff_success_rates),
    )
    return _params


def current_model_params() -> ModelParams | None:
    """The cached parameters, or None if nothing was loaded."""
    return _params


def reset_model_params() -> None:
    """Clear the cache. For tests only."""
    global _attempted, _params
    _attempted = False
    _params = None


def load_model_params_file(path: Path | None = None) -> ModelParams | None:
    """Load model parameters from a JSON file.

    Default path: ~/.poker_assist/model_params.json

    Returns None if the file does not exist or cannot be read, so the
    engine falls back to its baseline bluff rates.
    """
    path = path or DEFAULT_PARAMS_PATH
    if not path.exists():
        return None

    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read model params at %s: %s", path, e)
        return None

    return ModelParams.from_dict(data)


def aggregate_bluff_results(results: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Build a parameter blob from recorded bluff outcomes.

    Each result is ``{"street": "flop", "success": True}``. Results
    without a street are counted under "unknown".
    """
    rates: dict[str, dict[str, int]] = {}
    for result in results:
        key = str(result.get("street") or "unknown").lower()
        entry = rates.setdefault(key, {"succ": 0, "total": 0})
        entry["total"] += 1
        if result.get("success") is True:
            entry["succ"] += 1
    return {"bluff_success_rates": rates}
