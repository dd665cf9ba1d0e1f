import math

from . import config as conf
from .common import calcDist, verboseprint
from .packet import Transmission
from .phy import minSF, rxPower


class BulkNode():
	def __init__(self, env, nodeid, x, y, data, gateway):
		self.env = env
		self.nodeid = nodeid
		self.x = x
		self.y = y
		self.dist = calcDist(gateway[0], x, gateway[1], y, gateway[2], 0)
		self.sf = minSF(nodeid, self.dist)  # fixed for the whole run
		self.rssi = rxPower(self.dist)
		self.data = data
		self.remaining = data
		self.energy = 0
		self.retransmissions = 0  # of the current packet
		self.nrRetransmissions = 0
		self.nrPacketsSent = 0
		self.transmission = None
		self.finished = False


	def payloadSize(self):
		return int(conf.PAYLOAD[self.sf-7])


	def expectedPackets(self):
		if self.data <= 0:
			return 0
		return math.ceil(self.data/self.payloadSize())


	def nextPayload(self):
		return min(self.payloadSize(), self.remaining)


	def schedule(self, startTime):
		p = Transmission(self.nodeid, self.sf, self.nextPayload(), startTime, self.rssi)
		self.transmission = p
		self.energy += p.timeOnAir * conf.PTX_W
		self.nrPacketsSent += 1
		verboseprint('Node', self.nodeid, 'will transmit', p.packetLen, 'bytes from', round(p.startTime, 6), 'to', round(p.endTime, 6))
		return p


	def reduce(self, size):
		if size <= 0:
			raise ValueError('Cannot reduce the backlog of node {} by {} bytes.'.format(self.nodeid, size))
		self.remaining -= size


	def transmit(self, onAir):
		""" simpy process: wakes up at the start of each scheduled transmission
			and hands it to onAir, until all data is sent.
		"""
		while not self.finished:
			p = self.transmission
			yield self.env.timeout(max(p.startTime - self.env.now, 0))
			if p is not self.transmission:
				# replaced after colliding with an earlier transmission
				continue
			onAir(self)
