"""
Unit tests for the capture-effect collision model at the gateway
"""

import pytest

from bulksim.collision import (captureCollision, checkcollision, powerCollision,
                               timingCollision)
from bulksim.packet import Transmission


def tx(nodeid, sf, start, rssi, plen=100):
    return Transmission(nodeid, sf, plen, start, rssi)


class TestTiming:
    """Test time overlap detection."""

    def test_disjoint(self):
        p1 = tx(1, 7, 0.0, -80)
        p2 = tx(2, 7, 1.0, -80)
        assert not timingCollision(p1, p2)
        assert not timingCollision(p2, p1)

    def test_partial_overlap(self):
        p1 = tx(1, 7, 0.0, -80)
        p2 = tx(2, 7, p1.timeOnAir/2, -80)
        assert timingCollision(p1, p2)
        assert timingCollision(p2, p1)

    def test_containment(self):
        """A short packet entirely within a long one overlaps it."""
        p1 = tx(1, 9, 0.0, -80)
        p2 = tx(2, 7, 0.01, -80, plen=10)
        assert p2.endTime < p1.endTime
        assert timingCollision(p1, p2)


class TestSameSF:
    """Test collisions between packets on the same SF."""

    def test_equal_power_both_collide(self):
        """Comparable power on the same SF destroys both packets."""
        p1 = tx(1, 7, 0.0, -80)
        p2 = tx(2, 7, 0.0, -80)
        assert powerCollision(p1, p2) == (p1, p2)
        assert checkcollision(p1, [p2]) == [p1, p2]
        assert p1.collided and p2.collided

    def test_within_threshold_both_collide(self):
        p1 = tx(1, 8, 0.0, -80)
        p2 = tx(2, 8, 0.001, -85)
        assert checkcollision(p1, [p2]) == [p1, p2]

    def test_stronger_selected_survives(self):
        """Capture effect: the weaker packet is lost, the stronger one survives."""
        p1 = tx(1, 7, 0.0, -70)
        p2 = tx(2, 7, 0.0, -90)
        assert checkcollision(p1, [p2]) == [p2]
        assert not p1.collided
        assert p2.collided

    def test_weaker_selected_suppressed(self):
        p1 = tx(1, 7, 0.0, -90)
        p2 = tx(2, 7, 0.0, -70)
        assert checkcollision(p1, [p2]) == [p1]
        assert p1.collided
        assert not p2.collided


class TestCaptureThresholds:
    """Test non-orthogonal collisions between different SFs."""

    def test_equal_power_different_sf_survive(self):
        p1 = tx(1, 7, 0.0, -80)
        p2 = tx(2, 12, 0.0, -80)
        assert captureCollision(p1, p2) == ()
        assert checkcollision(p1, [p2]) == []

    def test_much_stronger_interferer_suppresses_selected(self):
        """SF8 20 dB above SF7 exceeds the SF7 rejection of -16 dB."""
        p1 = tx(1, 7, 0.0, -100)
        p2 = tx(2, 8, 0.0, -80)
        assert captureCollision(p1, p2) == (p1,)
        assert checkcollision(p1, [p2]) == [p1]

    def test_selected_suppresses_much_weaker_sf(self):
        """SF8 30 dB below SF7 is under its -24 dB rejection."""
        p1 = tx(1, 7, 0.0, -70)
        p2 = tx(2, 8, 0.0, -100)
        assert captureCollision(p1, p2) == (p2,)

    def test_asymmetric_thresholds(self):
        """SF8 survives 20 dB of SF7 interference, SF7 does not survive 20 dB of SF8."""
        strong7 = tx(1, 7, 0.0, -80)
        weak8 = tx(2, 8, 0.0, -100)
        assert captureCollision(strong7, weak8) == ()
        weak7 = tx(3, 7, 0.0, -100)
        strong8 = tx(4, 8, 0.0, -80)
        assert captureCollision(weak7, strong8) == (weak7,)


class TestCheckCollision:
    """Test resolution against several transmissions."""

    def test_selected_listed_once(self):
        p1 = tx(1, 7, 0.0, -80)
        others = [tx(2, 7, 0.0, -81), tx(3, 7, 0.01, -82)]
        collided = checkcollision(p1, others)
        assert collided[0] is p1
        assert collided.count(p1) == 1
        assert len(collided) == 3

    def test_only_overlapping_packets_checked(self):
        p1 = tx(1, 7, 0.0, -80)
        later = tx(2, 7, 5.0, -80)
        assert checkcollision(p1, [later]) == []
        assert not later.collided

    @pytest.mark.parametrize("sf", range(7, 13))
    def test_same_sf_symmetric(self, sf):
        """Whichever packet is selected, a matched pair always loses both."""
        p1 = tx(1, sf, 0.0, -80)
        p2 = tx(2, sf, 0.0, -82)
        assert set(checkcollision(p2, [p1])) == {p1, p2}
