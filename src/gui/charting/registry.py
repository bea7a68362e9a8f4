"""Chart registry.

Maps logical chart types to builder callables decoupled from the concrete
backend, and memoizes built charts: a request whose type, data and options
serialize to the same JSON reuses the earlier result instead of recomputing
sequences, paths and colors.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections import OrderedDict
from dataclasses import dataclass, replace
from time import perf_counter
from typing import Any, Callable, Dict, Optional, Tuple

from .backends import MatplotlibChartBackend
from .types import ChartRequest, ChartResult

log = logging.getLogger(__name__)

Builder = Callable[[ChartRequest, MatplotlibChartBackend], ChartResult]


@dataclass
class ChartType:
    """Metadata for a registered chart type."""

    chart_type: str
    builder: Builder
    description: str
    meta: Dict[str, Any] | None = None


class ChartRegistry:
    def __init__(self, cache_limit: int = 32) -> None:
        self._types: Dict[str, ChartType] = {}
        self._backend = MatplotlibChartBackend()
        self._snapshot_cache: "OrderedDict[str, Tuple[ChartResult, float]]" = OrderedDict()
        self._snapshot_cache_limit = cache_limit

    @property
    def backend(self) -> MatplotlibChartBackend:
        return self._backend

    # ---------------- Core type registration ----------------------------
    def register(self, chart_type: str, builder: Builder, description: str, **meta: Any) -> None:
        if chart_type in self._types:
            raise ValueError(f"Chart type already registered: {chart_type}")
        self._types[chart_type] = ChartType(chart_type, builder, description, meta=meta or None)

    def build(self, req: ChartRequest) -> ChartResult:
        """Eagerly build the requested chart and record build duration (ms)."""
        ct = self._types.get(req.chart_type)
        if ct is None:
            raise KeyError(f"Unknown chart type: {req.chart_type}")
        start = perf_counter()
        result = ct.builder(req, self._backend)
        elapsed = (perf_counter() - start) * 1000.0
        result.meta.setdefault("build_ms", elapsed)
        log.debug("built %s in %.1f ms", req.chart_type, elapsed)
        return result

    # ---------------- Lazy building -----------------------------------
    def build_lazy(self, req: ChartRequest) -> "LazyChartProxy":
        return LazyChartProxy(self, req)

    # ---------------- Snapshot caching --------------------------------
    @staticmethod
    def cache_key(req: ChartRequest) -> Optional[str]:
        """SHA-256 of the request's JSON form, or None if it is not serializable."""
        key_material = {"type": req.chart_type, "data": req.data, "options": req.options}
        try:
            payload = json.dumps(key_material, sort_keys=True)
        except (TypeError, ValueError):
            return None
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def build_cached(self, req: ChartRequest) -> ChartResult:
        """Return chart using snapshot cache if an identical request was seen.

        The first build is marked ``cache_hit=False``; each reuse returns a
        shallow copy marked ``cache_hit=True`` that shares the figure but has
        its own ``meta`` dict, so earlier results are never modified.
        Requests that cannot be serialized bypass the cache.
        """
        key = self.cache_key(req)
        if key is None:
            log.debug("request for %s not serializable; building uncached", req.chart_type)
            return self.build(req)
        if key in self._snapshot_cache:
            cached, _ts = self._snapshot_cache[key]
            self._snapshot_cache.move_to_end(key)
            return replace(cached, meta={**cached.meta, "cache_hit": True})
        result = self.build(req)
        result.meta.setdefault("cache_hit", False)
        self._snapshot_cache[key] = (replace(result, meta=dict(result.meta)), perf_counter())
        if len(self._snapshot_cache) > self._snapshot_cache_limit:
            self._snapshot_cache.popitem(last=False)  # evict LRU
        return result

    def clear_cache(self) -> None:
        self._snapshot_cache.clear()

    def cache_size(self) -> int:
        return len(self._snapshot_cache)

    def list_types(self) -> Dict[str, str]:
        return {k: v.description for k, v in self._types.items()}


chart_registry = ChartRegistry()


class LazyChartProxy:
    """Proxy object deferring chart construction until first access.

    Access the `widget` property (or call materialize()) to trigger build.
    Subsequent accesses reuse the cached ChartResult.
    """

    __slots__ = ("_registry", "_req", "_result")

    def __init__(self, registry: ChartRegistry, req: ChartRequest) -> None:
        self._registry = registry
        self._req = req
        self._result: ChartResult | None = None

    def materialize(self) -> ChartResult:
        if self._result is None:
            self._result = self._registry.build(self._req)
            self._result.meta.setdefault("lazy", True)
        return self._result

    @property
    def widget(self):  # noqa: D401
        return self.materialize().widget

    @property
    def meta(self) -> Dict[str, Any]:  # allow inspection even before build
        if self._result is None:
            return {"lazy": True, "built": False}
        return self._result.meta


def register_chart_type(chart_type: str, builder: Builder, description: str) -> None:
    chart_registry.register(chart_type, builder, description)
