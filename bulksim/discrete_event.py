import os
import time

import numpy as np
import pandas as pd
import simpy

from . import config as conf
from .collision import checkcollision
from .common import verboseprint
from .metrics import computeResults
from .node import BulkNode
from .phy import airtime
from .terrain import gatewayPosition


def simReport(data, subdir, param):
	fname = "simReport_{}_{}.csv".format(conf.BW, param)
	os.makedirs(os.path.join("out", "report", subdir), exist_ok=True)
	df_new = pd.DataFrame(data)
	df_new.to_csv(os.path.join("out", "report", subdir, fname), index=False)
	return os.path.join("out", "report", subdir, fname)


class BulkSimulation():
	""" Every node sends its whole backlog to the gateway, one payload at a time,
		respecting the duty cycle. A transmission is resolved when it starts: it is
		checked against all other scheduled transmissions it overlaps with.

		seed overrides conf.SEED, backlogs (nodeid -> bytes) and initialStarts
		(nodeid -> s) override the random amount of data and the random first
		transmission of a node.
	"""
	def __init__(self, terrain, coords, seed=None, maxRetransmissions=None, backlogs=None, initialStarts=None):
		if not coords:
			raise ValueError('Need at least one node.')
		self.env = simpy.Environment()
		self.rng = np.random.default_rng(conf.SEED if seed is None else seed)
		self.gateway = gatewayPosition(terrain)
		self.maxRetransmissions = conf.MAX_RETR if maxRetransmissions is None else maxRetransmissions
		self.dropped = 0
		self.nrCollisions = 0
		self.collectionTime = 0
		self.executionTime = 0
		self.examined = []

		# find the minimum SF per node, aborts on the first unreachable node
		self.nodes = {}
		for nodeid in sorted(coords):
			x, y = coords[nodeid]
			if backlogs is not None and nodeid in backlogs:
				data = backlogs[nodeid]
			else:
				data = conf.DATA_MIN + int(self.rng.integers(conf.DATA_RANGE))
			node = BulkNode(self.env, nodeid, x, y, data, self.gateway)
			verboseprint('Node', nodeid, 'got SF', node.sf)
			self.nodes[nodeid] = node
		self.totalTransmissions = sum(n.expectedPackets() for n in self.nodes.values())

		# initial transmission
		for node in self.nodes.values():
			if node.remaining <= 0:
				self.finish(node)
				continue
			if initialStarts is not None and node.nodeid in initialStarts:
				start = initialStarts[node.nodeid]
			else:
				start = self.rounded(self.rng.random()*airtime(node.sf)*len(self.nodes))
			node.schedule(start)


	def rounded(self, t):
		# microsecond resolution
		return int(t*1000000)/1000000


	def jitter(self):
		return self.rounded(self.rng.random()*conf.MAX_VARIANCE)


	def nextStart(self, node, previous):
		# stay silent for the rest of the duty cycle, then wait a random bit more
		at = airtime(node.sf, node.nextPayload())
		return previous.startTime + at/conf.DUTY_CYCLE + self.jitter()


	def run(self):
		startTime = time.time()
		for node in self.nodes.values():
			if not node.finished:
				self.env.process(node.transmit(self.onAir))
		self.env.run()
		self.executionTime = time.time() - startTime
		return computeResults(self)


	def onAir(self, node):
		p = node.transmission
		active = [n.transmission for n in self.nodes.values() if n.transmission is not None]
		verboseprint('At time', round(p.startTime, 6), len(active), 'transmissions available, grabbed node', node.nodeid, 'until', round(p.endTime, 6))
		if p.endTime > self.collectionTime:
			self.collectionTime = p.endTime

		# check for collisions with other transmissions (time, SF, power)
		others = [o for o in active if o is not p and self.nodes[o.nodeid].remaining > 0]
		collided = checkcollision(p, others)
		self.nrCollisions += len(collided)
		for c in collided:
			self.failed(c)
		if not p.collided:
			self.delivered(p)


	def failed(self, p):
		node = self.nodes[p.nodeid]
		node.transmission = None
		if node.retransmissions < self.maxRetransmissions:
			node.retransmissions += 1
			node.nrRetransmissions += 1
			verboseprint('Node', node.nodeid, 'will retransmit, attempt', node.retransmissions)
		else:
			self.dropped += 1
			node.reduce(node.payloadSize())
			node.retransmissions = 0
			verboseprint('Node', node.nodeid, "'s packet lost!")
		if node.remaining > 0:
			node.schedule(self.nextStart(node, p))
		else:
			self.finish(node)


	def delivered(self, p):
		node = self.nodes[p.nodeid]
		node.transmission = None
		node.retransmissions = 0
		node.reduce(p.packetLen)
		verboseprint('Node', node.nodeid, 'transmitted successfully!', max(node.remaining, 0), 'bytes left')
		if node.remaining > 0:
			node.schedule(self.nextStart(node, p))
		else:
			self.finish(node)


	def finish(self, node):
		node.finished = True
		self.examined.append(node.nodeid)
