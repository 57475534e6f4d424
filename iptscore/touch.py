"""Translation of contact frames into multitouch and singletouch input events."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Set, Tuple

from .contact import Contact

EV_SYN = 0x00
EV_KEY = 0x01
EV_ABS = 0x03

SYN_REPORT = 0
BTN_TOUCH = 0x14A
INPUT_PROP_DIRECT = 0x01

ABS_X = 0x00
ABS_Y = 0x01
ABS_MT_SLOT = 0x2F
ABS_MT_TOUCH_MAJOR = 0x30
ABS_MT_TOUCH_MINOR = 0x31
ABS_MT_ORIENTATION = 0x34
ABS_MT_POSITION_X = 0x35
ABS_MT_POSITION_Y = 0x36
ABS_MT_TRACKING_ID = 0x39

MAX_CONTACTS = 16
MAX_X = 9600
MAX_Y = 7200
# sqrt(MAX_X² + MAX_Y²)
DIAGONAL = 12000

Event = Tuple[int, int, int]


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass
class TouchConfig:
    """Screen geometry and touch behaviour settings (lengths in cm)."""

    width: float
    height: float
    touch_overshoot: float = 0.5
    touch_disable_on_palm: bool = False


@dataclass(frozen=True)
class AbsInfo:
    """Range and resolution of an absolute axis."""

    code: int
    minimum: int
    maximum: int
    resolution: int


class EventSink(Protocol):
    """Something that accepts a device description and input events."""

    def configure(
        self, name: str, vendor: int, product: int, absinfo: Sequence[AbsInfo]
    ) -> None: ...

    def emit(self, type: int, code: int, value: int) -> None: ...


@dataclass
class RecordingSink:
    """An event sink that keeps the device description and every event."""

    name: Optional[str] = None
    vendor: Optional[int] = None
    product: Optional[int] = None
    absinfo: List[AbsInfo] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)

    def configure(
        self, name: str, vendor: int, product: int, absinfo: Sequence[AbsInfo]
    ) -> None:
        """Store the description of the device."""
        self.name = name
        self.vendor = vendor
        self.product = product
        self.absinfo = list(absinfo)

    def emit(self, type: int, code: int, value: int) -> None:
        """Record one event."""
        self.events.append((type, code, value))


class TouchDevice:
    """Emits input events for frames of touch contacts."""

    def __init__(
        self,
        config: TouchConfig,
        vendor: int,
        product: int,
        sink: Optional[EventSink] = None,
    ) -> None:
        self.config = config
        self.sink: EventSink = sink if sink is not None else RecordingSink()

        self._current: Set[int] = set()
        self._last: Set[int] = set()
        self._lift: Set[int] = set()
        self._single_index = 0
        self._enabled = True

        diag = math.hypot(config.width, config.height)

        # Resolution for X / Y is expected to be units/mm.
        res_x = _round(MAX_X / (config.width * 10))
        res_y = _round(MAX_Y / (config.height * 10))
        res_d = _round(DIAGONAL / (diag * 10))

        self.sink.configure(
            "IPTS Touch",
            vendor,
            product,
            [
                AbsInfo(ABS_MT_SLOT, 0, MAX_CONTACTS, 0),
                AbsInfo(ABS_MT_TRACKING_ID, 0, MAX_CONTACTS, 0),
                AbsInfo(ABS_MT_POSITION_X, 0, MAX_X, res_x),
                AbsInfo(ABS_MT_POSITION_Y, 0, MAX_Y, res_y),
                AbsInfo(ABS_MT_ORIENTATION, 0, 180, 0),
                AbsInfo(ABS_MT_TOUCH_MAJOR, 0, DIAGONAL, res_d),
                AbsInfo(ABS_MT_TOUCH_MINOR, 0, DIAGONAL, res_d),
                AbsInfo(ABS_X, 0, MAX_X, res_x),
                AbsInfo(ABS_Y, 0, MAX_Y, res_y),
            ],
        )

    def update(self, contacts: Sequence[Contact]) -> None:
        """Emit the events for one frame of contacts."""
        if not self._enabled:
            return

        self._search_lifted(contacts)

        if self._is_blocked(contacts):
            self._lift_all()
        else:
            self._process(contacts)

        self._sync()

    def disable(self) -> None:
        """Disable the touchscreen and lift all contacts."""
        self._enabled = False

        self._lift_all()
        self._sync()

        self._current.clear()
        self._last.clear()
        self._lift.clear()

    def enable(self) -> None:
        """Enable the touchscreen."""
        self._enabled = True

    def enabled(self) -> bool:
        """Whether the touchscreen is enabled."""
        return self._enabled

    def active(self) -> bool:
        """Whether any contacts are currently active."""
        return bool(self._current)

    def _search_lifted(self, contacts: Sequence[Contact]) -> None:
        self._last = self._current
        self._current = {c.index for c in contacts if c.index is not None}
        self._lift = self._last - self._current

    def _is_blocked(self, contacts: Sequence[Contact]) -> bool:
        if not self.config.touch_disable_on_palm:
            return False
        return any(c.valid is False for c in contacts)

    def _process(self, contacts: Sequence[Contact]) -> None:
        reset_singletouch = True

        ox = self.config.touch_overshoot / self.config.width
        oy = self.config.touch_overshoot / self.config.height

        for contact in contacts:
            if contact.index is None:
                continue
            index = contact.index

            if contact.stable is False:
                continue

            x, y = contact.mean
            lift = (
                contact.valid is False
                or x < -ox
                or x > ox + 1
                or y < -oy
                or y > oy + 1
            )

            if lift:
                self._lift_multitouch(index)
            else:
                self._emit_multitouch(contact)

            if self._single_index != index:
                continue

            if not lift:
                self._emit_singletouch(contact)
                reset_singletouch = False

        for index in sorted(self._lift):
            self._lift_multitouch(index)

        if reset_singletouch:
            self._lift_singletouch()

            for contact in contacts:
                if contact.index is None or contact.index == self._single_index:
                    continue
                if contact.valid is False:
                    continue
                self._single_index = contact.index
                return

    def _lift_multitouch(self, index: int) -> None:
        self.sink.emit(EV_ABS, ABS_MT_SLOT, index)
        self.sink.emit(EV_ABS, ABS_MT_TRACKING_ID, -1)

    def _emit_multitouch(self, contact: Contact) -> None:
        index = contact.index if contact.index is not None else 0

        x = _round(_clamp(contact.mean[0]) * MAX_X)
        y = _round(_clamp(contact.mean[1]) * MAX_Y)

        angle = _round(contact.orientation * 180)
        major = _round(max(contact.size) * DIAGONAL)
        minor = _round(min(contact.size) * DIAGONAL)

        self.sink.emit(EV_ABS, ABS_MT_SLOT, index)
        self.sink.emit(EV_ABS, ABS_MT_TRACKING_ID, index)
        self.sink.emit(EV_ABS, ABS_MT_POSITION_X, x)
        self.sink.emit(EV_ABS, ABS_MT_POSITION_Y, y)

        self.sink.emit(EV_ABS, ABS_MT_ORIENTATION, angle)
        self.sink.emit(EV_ABS, ABS_MT_TOUCH_MAJOR, major)
        self.sink.emit(EV_ABS, ABS_MT_TOUCH_MINOR, minor)

    def _lift_singletouch(self) -> None:
        self.sink.emit(EV_KEY, BTN_TOUCH, 0)

    def _emit_singletouch(self, contact: Contact) -> None:
        x = _round(_clamp(contact.mean[0]) * MAX_X)
        y = _round(_clamp(contact.mean[1]) * MAX_Y)

        self.sink.emit(EV_KEY, BTN_TOUCH, 1)
        self.sink.emit(EV_ABS, ABS_X, x)
        self.sink.emit(EV_ABS, ABS_Y, y)

    def _lift_all(self) -> None:
        for index in sorted(self._current):
            self.sink.emit(EV_ABS, ABS_MT_SLOT, index)
            self._lift_multitouch(index)

        for index in sorted(self._last):
            self.sink.emit(EV_ABS, ABS_MT_SLOT, index)
            self._lift_multitouch(index)

        self._lift_singletouch()

    def _sync(self) -> None:
        self.sink.emit(EV_SYN, SYN_REPORT, 0)