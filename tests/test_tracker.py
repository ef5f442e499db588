import pytest

from sunphase.model.phase import DayBoundary, Phase
from sunphase.runtime.tracker import DayPhaseTracker, classify

SIX_TO_SIX = DayBoundary(sunrise_minutes=360, sunset_minutes=1080)


@pytest.mark.parametrize("minute,expected", [
  (0, Phase.NIGHT),
  (344, Phase.NIGHT),
  (345, Phase.NIGHT),
  (346, Phase.DAY),
  (360, Phase.DAY),
  (1094, Phase.DAY),
  (1095, Phase.NIGHT),
  (1439, Phase.NIGHT),
])
def test_classify_twilight_edges(minute, expected):
  assert classify(minute, SIX_TO_SIX) is expected


def test_classify_changes_at_most_twice():
  phases = [classify(m, SIX_TO_SIX) for m in range(1440)]
  changes = sum(1 for a, b in zip(phases, phases[1:]) if a is not b)
  assert changes == 2
  assert phases[0] is Phase.NIGHT and phases[-1] is Phase.NIGHT


def test_classify_rejects_out_of_range_minutes():
  with pytest.raises(ValueError):
    classify(1440, SIX_TO_SIX)
  with pytest.raises(ValueError):
    classify(-1, SIX_TO_SIX)


def test_classify_pinned_boundary():
  b = DayBoundary.pinned(Phase.DAY)
  assert all(classify(m, b) is Phase.DAY for m in (0, 720, 1439))


def test_first_tick_always_emits():
  t = DayPhaseTracker(SIX_TO_SIX)
  assert t.phase is None
  ev = t.tick(100)
  assert ev.phase is Phase.NIGHT
  assert ev.previous is None
  assert t.phase is Phase.NIGHT


def test_repeated_ticks_are_silent():
  t = DayPhaseTracker(SIX_TO_SIX)
  t.tick(720)
  assert all(t.tick(720) is None for _ in range(5))
  assert t.tick(900) is None


def test_each_crossing_emits_once():
  seen = []
  t = DayPhaseTracker(SIX_TO_SIX)
  t.add_listener(seen.append)
  for m in range(0, 1440, 5):
    t.tick(m)
  assert [e.phase for e in seen] == [Phase.NIGHT, Phase.DAY, Phase.NIGHT]
  assert seen[1].previous is Phase.NIGHT
  assert seen[1].minute == 350
  assert seen[2].minute == 1095


def test_new_boundary_alone_does_not_fire():
  t = DayPhaseTracker(SIX_TO_SIX)
  t.tick(720)
  t.set_boundary(DayBoundary(sunrise_minutes=300, sunset_minutes=1200))
  assert t.boundary.sunset_minutes == 1200
  assert t.tick(720) is None
  assert t.tick(1100) is None


def test_failing_listener_does_not_block_others():
  calls = []

  def broken(_):
    raise RuntimeError("boom")

  t = DayPhaseTracker(SIX_TO_SIX)
  t.add_listener(broken)
  t.add_listener(calls.append)
  assert t.tick(720) is not None
  assert len(calls) == 1
  assert t.remove_listener(broken)
  assert not t.remove_listener(broken)
