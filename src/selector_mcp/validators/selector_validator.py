"""Validator for selector part lists, built on the fluent selector builder."""

from typing import List, Optional, Tuple, Dict, Any, Mapping, Sequence
from dataclasses import dataclass

from ..builders.selector_builder import FragmentKind, Selector
from ..config import AnalysisConfig
from ..utils.errors import SelectorError
from ..utils.logging_config import LoggerMixin

Parts = Sequence[Mapping[str, Any]]


@dataclass
class SelectorValidationResult:
    """Result of selector validation."""

    valid: bool
    error: Optional[str]
    selector: Optional[str]
    selector_type: str
    specificity: Tuple[int, int, int]  # (id, class, type)


class SelectorValidator(LoggerMixin):
    """Validator for selectors described as lists of parts."""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        combinators: Optional[List[str]] = None,
    ):
        self.config = config or AnalysisConfig()
        # None accepts any combinator value
        self.combinators = combinators

    def validate_parts(self, parts: Parts) -> SelectorValidationResult:
        """
        Validate a selector given as ``{"kind": ..., "value": ...}`` parts.

        Args:
            parts: Selector parts in order, combinators included

        Returns:
            SelectorValidationResult with validation results
        """
        if not parts:
            return SelectorValidationResult(
                valid=False,
                error="Empty selector",
                selector=None,
                selector_type="unknown",
                specificity=(0, 0, 0),
            )

        try:
            selector = Selector.from_parts(parts, self.combinators)
        except SelectorError as e:
            self.logger.debug(f"Selector parts rejected: {e.message}")
            return SelectorValidationResult(
                valid=False,
                error=e.message,
                selector=e.selector,
                selector_type="unknown",
                specificity=(0, 0, 0),
            )

        return SelectorValidationResult(
            valid=True,
            error=None,
            selector=selector.stringify(),
            selector_type=self._determine_selector_type(selector),
            specificity=selector.specificity(),
        )

    def validate_many(self, selectors: List[Parts]) -> List[SelectorValidationResult]:
        """Validate multiple selectors."""
        return [self.validate_parts(parts) for parts in selectors]

    def _determine_selector_type(self, selector: Selector) -> str:
        """Determine the type of a built selector from its fragments."""
        kinds = [fragment.kind for fragment in selector.fragments]

        if FragmentKind.COMBINATOR in kinds:
            joints = [
                fragment.value.strip()
                for fragment in selector.fragments
                if fragment.kind is FragmentKind.COMBINATOR
            ]
            return "descendant" if all(joint == "" for joint in joints) else "combinator"
        # The most significant trailing kind names the selector
        for kind, label in (
            (FragmentKind.PSEUDO_ELEMENT, "pseudo-element"),
            (FragmentKind.PSEUDO_CLASS, "pseudo-class"),
            (FragmentKind.ATTRIBUTE, "attribute"),
            (FragmentKind.CLASS, "class"),
            (FragmentKind.ID, "id"),
        ):
            if kind in kinds:
                return label
        return "type"

    def analyze_selector_complexity(self, parts: Parts) -> Dict[str, Any]:
        """Analyze selector complexity and provide recommendations."""
        result = self.validate_parts(parts)
        recommendations: List[str] = []

        analysis: Dict[str, Any] = {
            "valid": result.valid,
            "selector": result.selector,
            "type": result.selector_type,
            "specificity": result.specificity,
            "specificity_score": sum(result.specificity),
            "recommendations": recommendations,
        }

        if not result.valid:
            return analysis

        specificity_score = sum(result.specificity)

        if result.specificity[0] > 1:
            recommendations.append("Avoid using multiple IDs in a single selector")

        if specificity_score > self.config.very_high_specificity:
            recommendations.append("Selector is very specific, consider simplifying")
        elif specificity_score > self.config.high_specificity:
            recommendations.append(
                "Selector has high specificity, consider using classes instead"
            )

        compounds = Selector.from_parts(parts, self.combinators).compounds()
        if len(compounds) > self.config.max_compounds:
            recommendations.append(
                "Selector is quite long, consider using more specific classes"
            )

        if any(
            fragment.kind is FragmentKind.ELEMENT and fragment.value == "*"
            for compound in compounds
            for fragment in compound
        ):
            recommendations.append("Universal selector (*) can impact performance")

        return analysis
