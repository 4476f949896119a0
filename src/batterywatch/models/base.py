from datetime import datetime

from pydantic import BaseModel

from batterywatch.utils.time import TimeUtils


class TimeStampModel(BaseModel):
    """Base model with timestamp conversion utilities.

    This class serves as a base for persisted models that may receive
    instants either as UNIX timestamps or as ISO-8601 strings.
    """

    @classmethod
    def convert_timestamp(cls, v: int | float) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            v: UNIX timestamp (seconds since epoch)

        Returns:
            datetime: Timezone-aware datetime object in UTC
        """
        return TimeUtils.epoch_to_datetime(int(v))
