"""Blueprint and campaign validator for bombergen.

Deterministic Python checks over generated blueprints. Useful after tuning
tables in bombergen.parameters or the generation modules, and from the CLI
(`bombergen validate`).

What IS validated:
1. Blueprint invariants: density bounds, boss/bonus exclusivity, merged
   roster with positive counts, Story seed formula
2. Story cadence: boss iff level % 10 == 0, bonus iff level % 5 == 0 and
   not a boss
3. Gating monotonicity: raising highest_completed never removes a power-up
4. Determinism: regenerating Story levels and daily challenges yields
   identical blueprints

Arcade blueprint seeds are deliberately excluded from the determinism check.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from bombergen.config import GeneratorConfig
from bombergen.generation.generator import LevelBlueprintGenerator
from bombergen.models.blueprint import GameMode, LevelBlueprint
from bombergen.parameters import STORY_LEVEL_COUNT, STORY_SEED_MULTIPLIER

DEFAULT_DAILY_SEEDS: list[int] = [20260101, 20260229, 20261017, 20261231]


# =============================================================================
# Validation Result Data Classes
# =============================================================================


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    CRITICAL = "critical"  # Blueprint violates a hard invariant
    MAJOR = "major"  # Campaign structure is wrong
    MINOR = "minor"  # Suspicious but playable
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue found."""

    check_name: str
    severity: ValidationSeverity
    message: str
    details: dict | None = None


@dataclass
class CheckResult:
    """Result of a single validation check."""

    check_name: str
    passed: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    metrics: dict = field(default_factory=dict)

    def add_issue(
        self,
        severity: ValidationSeverity,
        message: str,
        details: dict | None = None,
    ) -> None:
        """Add an issue to this check result."""
        self.issues.append(
            ValidationIssue(
                check_name=self.check_name,
                severity=severity,
                message=message,
                details=details,
            )
        )
        if severity in (ValidationSeverity.CRITICAL, ValidationSeverity.MAJOR):
            self.passed = False


@dataclass
class ValidationResult:
    """Complete validation result for a set of blueprints."""

    overall_passed: bool = True
    blueprint_count: int = 0

    invariants: CheckResult | None = None
    cadence: CheckResult | None = None
    gating: CheckResult | None = None
    determinism: CheckResult | None = None

    def _checks(self) -> list[CheckResult | None]:
        return [self.invariants, self.cadence, self.gating, self.determinism]

    def get_all_issues(self) -> list[ValidationIssue]:
        """Get all issues from all checks."""
        issues = []
        for check in self._checks():
            if check is not None:
                issues.extend(check.issues)
        return issues

    def get_critical_issues(self) -> list[ValidationIssue]:
        """Get only critical issues."""
        return [
            i for i in self.get_all_issues() if i.severity == ValidationSeverity.CRITICAL
        ]

    def get_major_issues(self) -> list[ValidationIssue]:
        """Get only major issues."""
        return [
            i for i in self.get_all_issues() if i.severity == ValidationSeverity.MAJOR
        ]

    def finalize(self) -> "ValidationResult":
        """Recompute overall_passed from the individual checks."""
        self.overall_passed = all(
            check.passed for check in self._checks() if check is not None
        )
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "overall_passed": self.overall_passed,
            "blueprint_count": self.blueprint_count,
            "checks": {
                "invariants": self._check_to_dict(self.invariants),
                "cadence": self._check_to_dict(self.cadence),
                "gating": self._check_to_dict(self.gating),
                "determinism": self._check_to_dict(self.determinism),
            },
            "issues": [
                {
                    "check_name": i.check_name,
                    "severity": i.severity.value,
                    "message": i.message,
                    "details": i.details,
                }
                for i in self.get_all_issues()
            ],
        }

    def _check_to_dict(self, check: CheckResult | None) -> dict | None:
        """Convert a check result to dictionary."""
        if check is None:
            return None
        return {
            "check_name": check.check_name,
            "passed": check.passed,
            "metrics": check.metrics,
            "issue_count": len(check.issues),
        }


# =============================================================================
# Checks
# =============================================================================


def _as_dict(blueprint: dict | LevelBlueprint) -> dict:
    if isinstance(blueprint, LevelBlueprint):
        return blueprint.model_dump(mode="json")
    return blueprint


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_blueprint_invariants(blueprints: Iterable[dict | LevelBlueprint]) -> CheckResult:
    """Check the hard invariants every blueprint must satisfy.

    Accepts raw dicts as well as LevelBlueprint objects, so data that never
    went through model validation can be checked too.

    Args:
        blueprints: Blueprints or blueprint dictionaries

    Returns:
        CheckResult with pass/fail and metrics
    """
    result = CheckResult(check_name="invariants", passed=True)
    checked = 0

    for blueprint in blueprints:
        data = _as_dict(blueprint)
        checked += 1
        number = data.get("number")

        density = data.get("block_density", 0.0)
        if isinstance(density, bool) or not isinstance(density, (int, float)):
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: block density {density!r} is not a number",
                details={"number": number, "block_density": density},
            )
        elif not 0.0 <= density <= 1.0:
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: block density {density} outside [0, 1]",
                details={"number": number, "block_density": density},
            )

        if data.get("is_boss_level") and data.get("is_bonus_level"):
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: both boss and bonus level",
                details={"number": number},
            )

        if data.get("power_ups") is None:
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: power-up roster is missing",
                details={"number": number},
            )

        enemies = data.get("enemies") or []
        types = [spawn.get("type") for spawn in enemies]
        duplicates = sorted((t for t, n in Counter(types).items() if n > 1), key=str)
        if duplicates:
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: enemy types listed more than once: {duplicates}",
                details={"number": number, "duplicates": duplicates},
            )

        non_positive = [
            spawn.get("type")
            for spawn in enemies
            if not _is_int(spawn.get("count")) or spawn["count"] < 1
        ]
        if non_positive:
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Level {number}: non-positive enemy counts for {non_positive}",
                details={"number": number, "types": non_positive},
            )

        if data.get("mode", GameMode.STORY.value) == GameMode.STORY.value:
            expected_seed = number * STORY_SEED_MULTIPLIER if _is_int(number) else None
            if data.get("seed") != expected_seed:
                result.add_issue(
                    ValidationSeverity.MAJOR,
                    f"Level {number}: seed {data.get('seed')} is not {expected_seed}",
                    details={"number": number, "seed": data.get("seed")},
                )

    result.metrics["blueprints_checked"] = checked
    return result


def check_story_cadence(blueprints: Iterable[dict | LevelBlueprint]) -> CheckResult:
    """Check that boss and bonus levels land on their cadence.

    Boss iff level % 10 == 0; bonus iff level % 5 == 0 and level % 10 != 0.
    Non-Story blueprints are skipped.
    """
    result = CheckResult(check_name="cadence", passed=True)
    boss_levels: list[int] = []
    bonus_levels: list[int] = []

    for blueprint in blueprints:
        data = _as_dict(blueprint)
        if data.get("mode", GameMode.STORY.value) != GameMode.STORY.value:
            continue

        number = data.get("number")
        if not _is_int(number):
            result.add_issue(
                ValidationSeverity.MAJOR,
                f"Story blueprint has a missing or non-integer level number: {number!r}",
                details={"number": number},
            )
            continue

        expected_boss = number % 10 == 0
        expected_bonus = number % 5 == 0 and not expected_boss

        if data.get("is_boss_level"):
            boss_levels.append(number)
        if data.get("is_bonus_level"):
            bonus_levels.append(number)

        if bool(data.get("is_boss_level")) != expected_boss:
            result.add_issue(
                ValidationSeverity.MAJOR,
                f"Level {number}: is_boss_level should be {expected_boss}",
                details={"number": number},
            )
        if bool(data.get("is_bonus_level")) != expected_bonus:
            result.add_issue(
                ValidationSeverity.MAJOR,
                f"Level {number}: is_bonus_level should be {expected_bonus}",
                details={"number": number},
            )

    result.metrics["boss_levels"] = boss_levels
    result.metrics["bonus_levels"] = bonus_levels
    return result


def check_gating_monotonicity(
    generator: LevelBlueprintGenerator,
    levels: Iterable[int] = range(1, STORY_LEVEL_COUNT + 1),
    max_highest_completed: int = STORY_LEVEL_COUNT,
) -> CheckResult:
    """Check that more progress never removes a power-up.

    For every level, the power-up multiset at highest_completed = h must be
    contained in the one at h + 1, and the ungated roster must contain all
    of them.
    """
    result = CheckResult(check_name="gating", passed=True)
    comparisons = 0

    for level in levels:
        ungated = Counter(generator.generate_story_level(level).power_ups)
        previous: Counter | None = None

        for highest in range(0, max_highest_completed + 1):
            current = Counter(generator.generate_story_level(level, highest).power_ups)
            comparisons += 1

            if previous is not None and previous - current:
                result.add_issue(
                    ValidationSeverity.MAJOR,
                    f"Level {level}: raising highest_completed to {highest} removed "
                    f"{sorted(p.value for p in (previous - current))}",
                    details={"level": level, "highest_completed": highest},
                )
            if current - ungated:
                result.add_issue(
                    ValidationSeverity.MAJOR,
                    f"Level {level}: gated roster at {highest} exceeds the ungated roster",
                    details={"level": level, "highest_completed": highest},
                )
            previous = current

    result.metrics["comparisons"] = comparisons
    return result


def check_determinism(
    generator: LevelBlueprintGenerator,
    levels: Iterable[int] = range(1, STORY_LEVEL_COUNT + 1),
    daily_seeds: Iterable[int] = DEFAULT_DAILY_SEEDS,
) -> CheckResult:
    """Check that Story levels and daily challenges regenerate identically."""
    result = CheckResult(check_name="determinism", passed=True)
    story_checked = 0
    daily_checked = 0

    for level in levels:
        story_checked += 1
        if generator.generate_story_level(level) != generator.generate_story_level(level):
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Story level {level} is not reproducible",
                details={"level": level},
            )

    for seed in daily_seeds:
        daily_checked += 1
        if generator.generate_daily_challenge(seed) != generator.generate_daily_challenge(seed):
            result.add_issue(
                ValidationSeverity.CRITICAL,
                f"Daily challenge for seed {seed} is not reproducible",
                details={"seed": seed},
            )

    result.metrics["story_checked"] = story_checked
    result.metrics["daily_checked"] = daily_checked
    return result


# =============================================================================
# Validator
# =============================================================================


class BlueprintValidator:
    """Validator for generated blueprints and the whole Story campaign.

    Usage:
        validator = BlueprintValidator()
        result = validator.validate_campaign()

        if not result.overall_passed:
            for issue in result.get_critical_issues():
                print(f"CRITICAL: {issue.message}")
    """

    def __init__(self, generator: LevelBlueprintGenerator | None = None):
        """Initialize validator.

        Args:
            generator: Generator to validate. Defaults to one using
                passthrough configuration, independent of the environment.
        """
        self.generator = generator or LevelBlueprintGenerator(GeneratorConfig())

    def validate_blueprints(self, blueprints: Iterable[dict | LevelBlueprint]) -> ValidationResult:
        """Run the per-blueprint checks on already generated blueprints."""
        items = list(blueprints)
        result = ValidationResult(blueprint_count=len(items))
        result.invariants = check_blueprint_invariants(items)
        result.cadence = check_story_cadence(items)
        return result.finalize()

    def validate_campaign(
        self,
        highest_completed: int | None = None,
        check_gating: bool = True,
        check_reproducibility: bool = True,
    ) -> ValidationResult:
        """Generate and validate all 50 Story levels.

        Args:
            highest_completed: Progress to generate the campaign with
            check_gating: Whether to run the gating monotonicity sweep
            check_reproducibility: Whether to run the determinism check

        Returns:
            ValidationResult with all check results
        """
        levels = range(1, STORY_LEVEL_COUNT + 1)
        blueprints = [
            self.generator.generate_story_level(level, highest_completed) for level in levels
        ]

        result = ValidationResult(blueprint_count=len(blueprints))
        result.invariants = check_blueprint_invariants(blueprints)
        result.cadence = check_story_cadence(blueprints)
        if check_gating:
            result.gating = check_gating_monotonicity(self.generator, levels)
        if check_reproducibility:
            result.determinism = check_determinism(self.generator, levels)
        return result.finalize()


def validate_campaign(highest_completed: int | None = None) -> ValidationResult:
    """Convenience function to validate the full Story campaign."""
    return BlueprintValidator().validate_campaign(highest_completed=highest_completed)
