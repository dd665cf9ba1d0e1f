import numpy as np


def computeResults(sim):
	nodes = list(sim.nodes.values())
	if sim.totalTransmissions > 0:
		pdr = (sim.totalTransmissions - sim.dropped)/sim.totalTransmissions
	else:
		pdr = np.nan  # nothing to deliver
	return {
		"collectionTime": sim.collectionTime,
		"avgEnergy": sum(n.energy for n in nodes)/len(nodes),
		"pdr": pdr,
		"dropped": sim.dropped,
		"totalTransmissions": sim.totalTransmissions,
		"nrPacketsSent": sum(n.nrPacketsSent for n in nodes),
		"nrRetransmissions": sum(n.nrRetransmissions for n in nodes),
		"nrCollisions": sim.nrCollisions,
		"sfCount": {sf: sum(1 for n in nodes if n.sf == sf) for sf in range(7, 13)},
		"executionTime": sim.executionTime,
	}


def printResults(results):
	print("Data collection time =", results["collectionTime"], "sec")
	print("Avg node consumption = {:.5f} J".format(results["avgEnergy"]))
	print("Packet Delivery Ratio = {:.5f}".format(results["pdr"]))
	print("Script execution time = {:.4f} secs".format(results["executionTime"]))
