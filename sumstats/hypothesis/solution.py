"""
Hypothesis test solution types.

TTestResult wraps Result[TTestParams] and provides a printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np

from sumstats.core.result import Result
from sumstats.hypothesis._common import TTestParams

if TYPE_CHECKING:
    from sumstats.hypothesis.design import TwoSampleDesign


@dataclass(frozen=True)
class TTestResult:
    """
    User-facing two-sample t-statistic result.

    ``t`` and ``p_value`` are the primary fields. ``p_value`` is a
    placeholder until the t-distribution is available;
    ``p_value_is_placeholder`` reports this and ``warnings`` repeats it.
    """
    _result: Result[TTestParams]
    _design: 'TwoSampleDesign | None'

    @property
    def t(self) -> float:
        """t-statistic."""
        return self._result.params.t

    @property
    def p_value(self) -> float:
        """Placeholder p-value (0.05)."""
        return self._result.params.p_value

    @property
    def p_value_is_placeholder(self) -> bool:
        return self._result.params.p_value_is_placeholder

    @property
    def mean_delta(self) -> float:
        """Difference of the sample means (first minus second)."""
        return self._result.params.mean_delta

    @property
    def pooled_term(self) -> float:
        """Quantity under the square root in the denominator of t."""
        return self._result.params.pooled_term

    @property
    def formula(self) -> str:
        return self._result.params.formula

    @property
    def params(self) -> TTestParams:
        return self._result.params

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """
        Format a short report.

        Produces output like:
            Two Sample t-statistic (formula: original)

        samples:  n1 = 4, n2 = 5
        t = -1.2345, p-value = 0.05 (placeholder)
        mean difference:  -2.5
        """
        p = self._result.params
        lines = [f"\t{self.info.get('method', 'Two Sample t-statistic')} "
                 f"(formula: {p.formula})", ""]

        if self._design is not None:
            lines.append(
                f"samples:  n1 = {self._design.samp_1.n}, "
                f"n2 = {self._design.samp_2.n}"
            )

        p_str = f"{p.p_value:.4g}"
        if p.p_value_is_placeholder:
            p_str += " (placeholder)"
        lines.append(f"t = {_format_number(p.t)}, p-value = {p_str}")
        lines.append(f"mean difference:  {_format_number(p.mean_delta)}")

        other = [w for w in self.warnings if 'placeholder' not in w]
        if other:
            lines.append("warnings:")
            lines.extend(f"  {w}" for w in other)

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestResult(t={p.t:.4g}, p_value={p.p_value:.4g}, "
            f"formula={p.formula!r})"
        )


def _format_number(x: float) -> str:
    """Format a number, handling nan and infinity."""
    if np.isnan(x):
        return "NaN"
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.5g}"
