from . import config as conf
from .common import verboseprint


def checkcollision(packet, others):
	""" Check for collisions at the gateway between packet, the earliest transmission
		on air, and the other scheduled transmissions.
		All collided packets get marked and are returned, packet itself first.
	"""
	casualties = []
	for other in others:
		if not timingCollision(packet, other):
			continue
		if sfCollision(packet, other):
			c = powerCollision(packet, other)
		else:
			c = captureCollision(packet, other)
		if len(c) == 2:
			verboseprint('Node', packet.nodeid, 'collided together with', other.nodeid)
		elif c:
			verboseprint('Node', c[0].nodeid, 'suppressed by', (other if c[0] is packet else packet).nodeid)
		# mark all the collided packets
		for p in c:
			p.collided = True
			if p is not packet and p not in casualties:
				casualties.append(p)
	if packet.collided:
		return [packet] + casualties
	return casualties


def timingCollision(p1, p2):
	# any overlap counts, also when one packet lies entirely within the other
	return p1.overlaps(p2)


def sfCollision(p1, p2):
	if p1.sf == p2.sf:
		return True
	return False


def threshold(aggressor, victim):
	return conf.CAPTURE_THRESHOLDS[aggressor.sf-7][victim.sf-7]


def powerCollision(p1, p2):
	powerThreshold = threshold(p1, p2)
	if abs(p1.rssi - p2.rssi) < powerThreshold:
		# packets are too close to each other, both collide
		# return both packets as casualties
		return (p1, p2)
	elif p1.rssi - p2.rssi < powerThreshold:
		# p2 overpowered p1, return p1 as casualty
		return (p1,)
	# p2 was the weaker packet, return it as a casualty
	return (p2,)


def captureCollision(p1, p2):
	""" Non-orthogonal transmissions on different SFs.
		The thresholds are not symmetric, so the check is done once with p1 as
		aggressor and once with p2 as aggressor.
	"""
	diff = p1.rssi - p2.rssi
	if diff > threshold(p1, p2):
		if -diff <= threshold(p2, p1):
			return (p2,)
		return ()
	if -diff > threshold(p2, p1):
		return (p1,)
	return (p1, p2)
