import enum
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar


class InterviewFilter(str, enum.Enum):
    all = "all"
    woman = "woman"
    not_woman = "not-woman"

    @property
    def label(self) -> str:
        return FILTER_LABELS[self]

    @property
    def empty_message(self) -> str:
        if self is InterviewFilter.all:
            return "No interviews yet."
        return "No interviews match this filter."


FILTER_LABELS = {
    InterviewFilter.all: "All",
    InterviewFilter.woman: "Woman",
    InterviewFilter.not_woman: "Not woman",
}

# display order of the filter buttons
FILTER_OPTIONS: Tuple[InterviewFilter, ...] = (
    InterviewFilter.all,
    InterviewFilter.woman,
    InterviewFilter.not_woman,
)

T = TypeVar("T")


def _is_woman(record) -> Optional[bool]:
    """
    Works on ORM rows (raw JSON dict) and on InterviewOut (parsed model).
    Only a real bool counts; anything else is "absent".
    """
    vars_ = getattr(record, "extracted_variables", None)
    if vars_ is None:
        return None
    value = vars_.get("is_woman") if isinstance(vars_, dict) else getattr(vars_, "is_woman", None)
    return value if isinstance(value, bool) else None


def matches(record, selector: InterviewFilter) -> bool:
    if selector is InterviewFilter.all:
        return True
    is_woman = _is_woman(record)
    if selector is InterviewFilter.woman:
        return is_woman is True
    if selector is InterviewFilter.not_woman:
        return is_woman is False
    raise ValueError(f"unknown interview filter: {selector!r}")


def filter_interviews(records: Iterable[T], selector: InterviewFilter) -> List[T]:
    """Records matching ``selector``, in their original order."""
    selector = InterviewFilter(selector)
    return [r for r in records if matches(r, selector)]


def count_by_filter(records: Sequence) -> dict:
    return {f.value: len(filter_interviews(records, f)) for f in FILTER_OPTIONS}
