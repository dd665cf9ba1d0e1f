#!/usr/bin/env python3
""" Event-based simulator for LoRa bulk data collection.
	Every node transmits its whole backlog to a single gateway in the middle of the
	terrain, on one channel, respecting the radio duty cycle, with the lowest SF that
	reaches the gateway.
	Usage: ./bulkLora.py terrain_file [--seed N] [--verbose]
"""
import sys

from bulksim.common import getParams
from bulksim.discrete_event import BulkSimulation
from bulksim.metrics import printResults
from bulksim.phy import UnreachableNodeError


def main(args):
	terrain, coords = getParams(args)
	try:
		sim = BulkSimulation(terrain, coords)
	except UnreachableNodeError as e:
		print(e)
		sys.exit(1)

	for nodeid, node in sim.nodes.items():
		print("#", nodeid, "got SF" + str(node.sf))
	print("Expected number of packets:", sim.totalTransmissions)

	# start simulation
	print("\n====== START OF SIMULATION ======")
	results = sim.run()

	print("\n====== END OF SIMULATION ======")
	print("Number of packets sent:", results["nrPacketsSent"])
	print("Number of collided packets:", results["nrCollisions"])
	print("Number of retransmissions:", results["nrRetransmissions"])
	print("Number of dropped packets:", results["dropped"])
	print("Nodes per SF:", ", ".join("SF{}: {}".format(sf, c) for sf, c in results["sfCount"].items()))
	print("---------------------")
	printResults(results)
	return results


if __name__ == "__main__":
	main(sys.argv)
