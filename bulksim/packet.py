from .phy import airtime


class Transmission():
	def __init__(self, nodeid, sf, plen, startTime, rssi):
		self.nodeid = nodeid
		self.sf = sf
		self.packetLen = plen
		self.rssi = rssi  # received power at the gateway in dBm
		self.timeOnAir = airtime(self.sf, self.packetLen)
		self.startTime = startTime
		self.endTime = startTime + self.timeOnAir
		self.collided = False


	def overlaps(self, other):
		return self.startTime <= other.endTime and other.startTime <= self.endTime


	def __repr__(self):
		return 'Transmission(node={}, SF{}, {}B, {} -> {})'.format(self.nodeid, self.sf, self.packetLen, self.startTime, self.endTime)
