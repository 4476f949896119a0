"""Charge-cycle counting and battery health estimation.

A charge cycle is counted when the battery drops to the low threshold
(20%) and is later charged to the full threshold (95%) while charging,
across any number of plug/unplug events in between. Rising above the
full threshold without charging abandons the cycle without credit.

Health is estimated from the cycle counter with a piecewise-linear
lithium-ion degradation curve:

- 0-300 cycles: Excellent (100% → 95%)
- 300-500 cycles: Good (95% → 85%)
- 500-800 cycles: Fair (85% → 70%)
- 800+ cycles: Poor (70% → 40% at 1300 cycles, floored at 40%)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Final

from batterywatch.common.enums import HealthStatus
from batterywatch.constants import (
    EXCELLENT_THRESHOLD,
    FAIR_THRESHOLD,
    FULL_BATTERY_THRESHOLD,
    GOOD_THRESHOLD,
    LOW_BATTERY_THRESHOLD,
    MIN_HEALTH_PERCENTAGE,
    POOR_SPAN,
)
from batterywatch.models.battery import HealthSummary
from batterywatch.models.state import HealthState
from batterywatch.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)

HEALTH_DESCRIPTIONS: Final[dict[HealthStatus, str]] = {
    HealthStatus.EXCELLENT: (
        "Your battery is in excellent condition. Continue with normal usage patterns."
    ),
    HealthStatus.GOOD: (
        "Your battery is in good condition with minimal degradation. Normal usage expected."
    ),
    HealthStatus.FAIR: (
        "Your battery shows moderate wear. You may notice slightly reduced battery life."
    ),
    HealthStatus.POOR: (
        "Your battery has significant wear. "
        "Consider battery replacement if experiencing poor performance."
    ),
}


class HealthEstimator:
    """Tracks charge cycles and derives battery health from them."""

    @staticmethod
    def observe(
        percentage: int,
        is_charging: bool,
        state: HealthState,
        now: datetime | None = None,
    ) -> HealthState:
        """Record one observation and update cycle tracking in place.

        At most one of start / complete / abandon happens per call, in
        that priority order.

        Args:
            percentage: Battery percentage (0-100)
            is_charging: True while charging or full
            state: Health state, mutated by this call
            now: Observation time (default: current time)

        Returns:
            The same state object, for chaining
        """
        now = now or TimeUtils.now_localized()

        if state.first_use_timestamp is None:
            state.first_use_timestamp = now
            logger.debug("First use date initialized")

        if percentage <= LOW_BATTERY_THRESHOLD and not state.cycle_in_progress:
            state.cycle_in_progress = True
            state.last_low_battery_timestamp = now
            logger.debug("Charge cycle started at %d%%", percentage)
        elif state.cycle_in_progress and is_charging and percentage >= FULL_BATTERY_THRESHOLD:
            state.charge_cycles += 1
            state.cycle_in_progress = False
            logger.info("Charge cycle completed! Total cycles: %d", state.charge_cycles)
        elif state.cycle_in_progress and not is_charging and percentage > FULL_BATTERY_THRESHOLD:
            state.cycle_in_progress = False
            logger.debug("Charge cycle reset - battery was not charged to full")

        return state

    @staticmethod
    def estimated_health_percentage(cycles: int) -> int:
        """Estimate battery health from completed charge cycles.

        Integer arithmetic throughout; the breakpoints are exact:
        300 → 95, 500 → 85, 800 → 70, 1300 and beyond → 40.

        Args:
            cycles: Completed charge cycles

        Returns:
            Estimated health percentage (40-100)
        """
        if cycles < EXCELLENT_THRESHOLD:
            return 100 - cycles * 5 // EXCELLENT_THRESHOLD

        if cycles < GOOD_THRESHOLD:
            span = GOOD_THRESHOLD - EXCELLENT_THRESHOLD
            return 95 - (cycles - EXCELLENT_THRESHOLD) * 10 // span

        if cycles < FAIR_THRESHOLD:
            span = FAIR_THRESHOLD - GOOD_THRESHOLD
            return 85 - (cycles - GOOD_THRESHOLD) * 15 // span

        health = 70 - (cycles - FAIR_THRESHOLD) * 30 // POOR_SPAN
        return max(health, MIN_HEALTH_PERCENTAGE)

    @staticmethod
    def health_status(cycles: int) -> HealthStatus:
        """Get the wear category for a cycle count.

        Uses the same breakpoints as :meth:`estimated_health_percentage`.
        """
        if cycles < EXCELLENT_THRESHOLD:
            return HealthStatus.EXCELLENT
        elif cycles < GOOD_THRESHOLD:
            return HealthStatus.GOOD
        elif cycles < FAIR_THRESHOLD:
            return HealthStatus.FAIR
        return HealthStatus.POOR

    @classmethod
    def health_description(cls, cycles: int) -> str:
        """Get a one-sentence description with advice for the cycle count."""
        return HEALTH_DESCRIPTIONS[cls.health_status(cycles)]

    @staticmethod
    def days_since_first_use(state: HealthState, now: datetime | None = None) -> int:
        """Whole days since tracking started, 0 if it has not started."""
        if state.first_use_timestamp is None:
            return 0
        return TimeUtils.days_between(state.first_use_timestamp, now or TimeUtils.now_localized())

    @classmethod
    def summary(cls, state: HealthState, now: datetime | None = None) -> HealthSummary:
        """Bundle the health figures for display.

        Args:
            state: Health state to summarize
            now: Reference time for the days-in-use figure

        Returns:
            HealthSummary for the current cycle count
        """
        cycles = state.charge_cycles
        return HealthSummary(
            cycles=cycles,
            health_percent=cls.estimated_health_percentage(cycles),
            status=cls.health_status(cycles),
            days_since_first_use=cls.days_since_first_use(state, now),
            description=cls.health_description(cycles),
        )

    @staticmethod
    def reset(state: HealthState) -> HealthState:
        """Clear all health tracking data. Use with caution!"""
        state.charge_cycles = 0
        state.cycle_in_progress = False
        state.first_use_timestamp = None
        state.last_low_battery_timestamp = None
        logger.info("Battery health data reset")
        return state
