"""Request/response service over the sequence engine."""

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from chromaseq.core import check_prediction, compare_sequences, invert, invert_parallel
from chromaseq.colors import hex_to_rgb
from chromaseq.exceptions import ChromaSeqError, InvalidParameterError, handle_errors, wrap_request_error
from chromaseq.models import (
    AppConfig,
    CheckRequest,
    CompareRequest,
    CompareResponse,
    GenerateRequest,
    GenerateResponse,
    InvertRequest,
    InvertResponse,
    Method,
    PredictionCheck,
    build_method,
)
from chromaseq.sequences import generate_hex, generate_hex_sequence, start_index

logger = logging.getLogger(__name__)


class SequenceService:
    """
    Fills request defaults from AppConfig and runs the engine.

    Every call is independent: the service holds configuration but no
    sequence state, and the seed is passed explicitly to every engine call.

    Usage Example:
        ```python
        service = SequenceService(AppConfig())
        response = service.handle_request("generate", {"method": "plastic", "seed": 42, "count": 3})
        # {"method": "plastic", "seed": 42, "start": 1, "colors": ["#851BE4", ...]}
        ```
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the sequence service.

        Args:
            config: Caller defaults (method, seed, search bounds). Defaults to AppConfig().
        """
        self.config = config or AppConfig()
        self._tools: dict[str, tuple[type[BaseModel], Callable[[Any], BaseModel]]] = {
            "generate": (GenerateRequest, self.generate),
            "invert": (InvertRequest, self.invert),
            "compare": (CompareRequest, self.compare),
            "check": (CheckRequest, self.check),
        }
        logger.debug(f"SequenceService initialized (default method: {self.config.default_method})")

    @property
    def tools(self) -> list[str]:
        """Names accepted by handle_request."""
        return sorted(self._tools)

    # =================================================================
    # Defaults
    # =================================================================

    def _method(self, name: Optional[str], params: dict[str, Any]) -> Method:
        return build_method(name or self.config.default_method, params)

    def _seed(self, seed: int | float | None) -> int | float:
        return self.config.default_seed if seed is None else seed

    # =================================================================
    # Operations
    # =================================================================

    @handle_errors(operation_name="generate colors")
    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Generate ``count`` consecutive hex colors."""
        method = self._method(request.method, request.params)
        seed = self._seed(request.seed)
        start = start_index(method) if request.start is None else request.start

        colors = generate_hex_sequence(method, request.count, seed, start)
        logger.info(f"Generated {len(colors)} {method.label} colors (seed={seed}, start={start})")
        return GenerateResponse(method=method.label, seed=seed, start=start, colors=colors)

    @handle_errors(operation_name="invert color")
    def invert(self, request: InvertRequest) -> InvertResponse:
        """Recover the index that produced ``request.hex``."""
        method = self._method(request.method, request.params)
        seed = self._seed(request.seed)
        color = hex_to_rgb(request.hex)
        max_search = self.config.max_search if request.max_search is None else request.max_search
        tolerance = request.tolerance or self.config.tolerance
        strategy = request.strategy or self.config.inversion_strategy
        workers = request.workers or self.config.workers

        if workers > 1:
            result = invert_parallel(color, method, seed, max_search, tolerance, strategy, workers)
        else:
            result = invert(color, method, seed, max_search, tolerance, strategy)

        verification = generate_hex(method, result.index, seed) if result.found else None
        if result.found:
            logger.info(f"Inverted {request.hex} -> n={result.index} ({method.label}, {result.searched} searched)")
        else:
            logger.info(
                f"No {method.label} index up to {max_search} matches {request.hex} "
                f"(closest distance {result.distance:.4f})"
            )

        return InvertResponse(
            hex=color.to_hex(),
            method=method.label,
            seed=seed,
            found=result.found,
            index=result.index,
            distance=result.distance,
            searched=result.searched,
            verification=verification,
        )

    @handle_errors(operation_name="compare sequences")
    def compare(self, request: CompareRequest) -> CompareResponse:
        """Rank methods by gap dispersion."""
        n = request.n or self.config.compare_length
        methods = [build_method(name) for name in request.methods] if request.methods else None
        report = compare_sequences(n, methods, self._seed(request.seed))

        logger.info(f"Compared {len(report.entries)} methods over {n} points (best: {report.best})")
        return CompareResponse(
            n=report.n,
            discrepancy=report.as_dict(),
            ranking=report.ranking,
            best=report.best,
            worst=report.worst,
        )

    @handle_errors(operation_name="check prediction")
    def check(self, request: CheckRequest) -> PredictionCheck:
        """Compare an observed color with the prediction for an index."""
        method = self._method(request.method, request.params)
        tolerance = request.tolerance or self.config.tolerance
        result = check_prediction(request.index, request.hex, method, self._seed(request.seed), tolerance)
        logger.debug(f"Prediction check n={request.index}: {result.predicted} vs {result.observed}")
        return result

    # =================================================================
    # JSON dispatch
    # =================================================================

    def handle_request(self, tool: Optional[str], params: Optional[Any] = None) -> dict[str, Any]:
        """
        Run one tool call and return a JSON-ready dict.

        Errors derived from ChromaSeqError (bad hex, unknown method, invalid
        parameters) come back as ``{error, error_type, tool, recovery_hint}``
        instead of being raised.

        Args:
            tool: One of ``generate``, ``invert``, ``compare``, ``check``
            params: Request payload
        """
        try:
            entry = self._tools.get(tool)
            if entry is None:
                raise InvalidParameterError("tool", tool, f"unknown tool, expected one of: {', '.join(self.tools)}")
            request_type, operation = entry
            if params is not None and not isinstance(params, dict):
                raise InvalidParameterError("params", params, "params must be a JSON object")

            try:
                request = request_type.model_validate(params or {})
            except ValidationError as e:
                raise wrap_request_error(e, tool) from e

            return operation(request).model_dump(mode="json")

        except ChromaSeqError as e:
            logger.info(f"Request '{tool}' failed: {e.technical_message}")
            return e.to_response(tool)
