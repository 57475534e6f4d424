import pytest

from iptscore.contact import Contact
from iptscore.touch import (
    ABS_MT_ORIENTATION,
    ABS_MT_POSITION_X,
    ABS_MT_POSITION_Y,
    ABS_MT_SLOT,
    ABS_MT_TOUCH_MAJOR,
    ABS_MT_TOUCH_MINOR,
    ABS_MT_TRACKING_ID,
    ABS_X,
    ABS_Y,
    BTN_TOUCH,
    DIAGONAL,
    EV_ABS,
    EV_KEY,
    EV_SYN,
    MAX_X,
    MAX_Y,
    SYN_REPORT,
    AbsInfo,
    RecordingSink,
    TouchConfig,
    TouchDevice,
)

SYNC = (EV_SYN, SYN_REPORT, 0)


@pytest.fixture
def sink():
    return RecordingSink()


def make_device(sink, **kwargs):
    config = TouchConfig(width=96.0, height=72.0, **kwargs)
    return TouchDevice(config, 0x1234, 0x5678, sink)


def corner_contact(index=0, **kwargs):
    return Contact(mean=(0.0, 1.0), size=(1.0, 0.0), orientation=1.0, index=index, **kwargs)


def test_configure_describes_device(sink):
    make_device(sink)
    assert sink.name == "IPTS Touch"
    assert sink.vendor == 0x1234
    assert sink.product == 0x5678
    by_code = {info.code: info for info in sink.absinfo}
    assert by_code[ABS_MT_POSITION_X].maximum == MAX_X
    assert by_code[ABS_MT_POSITION_Y].maximum == MAX_Y
    assert by_code[ABS_MT_TOUCH_MAJOR].maximum == DIAGONAL
    assert by_code[ABS_MT_ORIENTATION] == AbsInfo(ABS_MT_ORIENTATION, 0, 180, 0)
    assert by_code[ABS_X].resolution == by_code[ABS_MT_POSITION_X].resolution
    assert by_code[ABS_Y].resolution == by_code[ABS_MT_POSITION_Y].resolution


def test_emit_contact_events(sink):
    device = make_device(sink)
    device.update([corner_contact()])
    assert sink.events == [
        (EV_ABS, ABS_MT_SLOT, 0),
        (EV_ABS, ABS_MT_TRACKING_ID, 0),
        (EV_ABS, ABS_MT_POSITION_X, 0),
        (EV_ABS, ABS_MT_POSITION_Y, MAX_Y),
        (EV_ABS, ABS_MT_ORIENTATION, 180),
        (EV_ABS, ABS_MT_TOUCH_MAJOR, DIAGONAL),
        (EV_ABS, ABS_MT_TOUCH_MINOR, 0),
        (EV_KEY, BTN_TOUCH, 1),
        (EV_ABS, ABS_X, 0),
        (EV_ABS, ABS_Y, MAX_Y),
        SYNC,
    ]
    assert device.active() is True


def test_positions_are_clamped(sink):
    device = make_device(sink, touch_overshoot=50.0)
    device.update([Contact(mean=(1.2, -0.2), size=(0.0, 0.0), index=0)])
    assert (EV_ABS, ABS_MT_POSITION_X, MAX_X) in sink.events
    assert (EV_ABS, ABS_MT_POSITION_Y, 0) in sink.events


def test_contact_removed_is_lifted(sink):
    device = make_device(sink)
    device.update([corner_contact()])
    sink.events.clear()
    device.update([])
    assert sink.events == [
        (EV_ABS, ABS_MT_SLOT, 0),
        (EV_ABS, ABS_MT_TRACKING_ID, -1),
        (EV_KEY, BTN_TOUCH, 0),
        SYNC,
    ]
    assert device.active() is False


def test_far_outside_contact_is_lifted(sink):
    device = make_device(sink, touch_overshoot=0.0)
    device.update([Contact(mean=(-0.5, 0.5), index=3)])
    assert (EV_ABS, ABS_MT_TRACKING_ID, -1) in sink.events
    assert (EV_ABS, ABS_MT_TRACKING_ID, 3) not in sink.events


def test_unstable_contact_is_ignored(sink):
    device = make_device(sink)
    device.update([corner_contact(stable=False)])
    assert sink.events == [(EV_KEY, BTN_TOUCH, 0), SYNC]


def test_invalid_contact_lifted_without_palm_blocking(sink):
    device = make_device(sink)
    device.update([corner_contact(index=2, valid=False)])
    assert sink.events[:2] == [(EV_ABS, ABS_MT_SLOT, 2), (EV_ABS, ABS_MT_TRACKING_ID, -1)]


def test_palm_blocks_all_contacts(sink):
    device = make_device(sink, touch_disable_on_palm=True)
    device.update([corner_contact(index=0), corner_contact(index=1, valid=False)])
    tracking = [e for e in sink.events if e[1] == ABS_MT_TRACKING_ID]
    assert tracking and all(value == -1 for _, _, value in tracking)
    assert sink.events[-2:] == [(EV_KEY, BTN_TOUCH, 0), SYNC]


def test_singletouch_switches_to_new_contact(sink):
    device = make_device(sink)
    device.update([corner_contact(index=0)])
    device.update([corner_contact(index=1)])
    sink.events.clear()
    device.update([corner_contact(index=1)])
    assert (EV_KEY, BTN_TOUCH, 1) in sink.events


def test_disable_lifts_and_ignores_updates(sink):
    device = make_device(sink)
    device.update([corner_contact()])
    sink.events.clear()
    device.disable()
    assert device.enabled() is False
    assert device.active() is False
    assert sink.events[-2:] == [(EV_KEY, BTN_TOUCH, 0), SYNC]
    sink.events.clear()
    device.update([corner_contact()])
    assert sink.events == []


def test_enable_restores_processing(sink):
    device = make_device(sink)
    device.disable()
    device.enable()
    assert device.enabled() is True
    sink.events.clear()
    device.update([corner_contact()])
    assert sink.events[-1] == SYNC
    assert (EV_ABS, ABS_MT_TRACKING_ID, 0) in sink.events