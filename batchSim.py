#!/usr/bin/env python3
""" Runs the bulk data collection simulation for a range of network sizes, several
	times each on a freshly generated terrain, and saves a CSV report per size.
	Usage: ./batchSim.py
"""
import numpy as np

from bulksim import config as conf
from bulksim.common import setBatch
from bulksim.discrete_event import BulkSimulation, simReport
from bulksim.phy import UnreachableNodeError
from bulksim.terrain import genTerrain


def runBatch(parameters, repetitions, side=None, subdir="Current"):
	if side is None:
		side = conf.TERRAIN_SIDE
	summary = {"collectionTime": [], "avgEnergy": [], "pdr": []}
	for p, nrNodes in enumerate(parameters):
		collectionTime = [0 for _ in range(repetitions)]
		avgEnergy = [0 for _ in range(repetitions)]
		pdr = [0 for _ in range(repetitions)]
		nrCollisions = [0 for _ in range(repetitions)]
		dropped = [0 for _ in range(repetitions)]
		print("\nStart of", p+1, "out of", len(parameters), "value", nrNodes)
		for rep in range(repetitions):
			setBatch(rep)
			coords = genTerrain(side, nrNodes, np.random.default_rng(rep))
			try:
				results = BulkSimulation(side*side, coords).run()
			except UnreachableNodeError as e:
				print(e)
				collectionTime[rep] = avgEnergy[rep] = pdr[rep] = np.nan
				nrCollisions[rep] = dropped[rep] = np.nan
				continue
			collectionTime[rep] = results["collectionTime"]
			avgEnergy[rep] = results["avgEnergy"]
			pdr[rep] = results["pdr"]
			nrCollisions[rep] = results["nrCollisions"]
			dropped[rep] = results["dropped"]
		if conf.SAVE:
			print('Saving to file...')
			data = {
				"collectionTime": collectionTime,
				"avgEnergy": avgEnergy,
				"PDR": pdr,
				"nrCollisions": nrCollisions,
				"dropped": dropped,
				"NR_NODES": nrNodes,
				"TERRAIN_SIDE": side,
				"BW": conf.BW,
				"MAX_RETR": conf.MAX_RETR,
				"MAX_VARIANCE": conf.MAX_VARIANCE,
			}
			simReport(data, subdir, nrNodes)
		print('Collection time average (s):', round(np.nanmean(collectionTime), 2))
		print('Node consumption average (J):', round(np.nanmean(avgEnergy), 5))
		print('PDR average:', round(np.nanmean(pdr), 5))
		summary["collectionTime"].append(np.nanmean(collectionTime))
		summary["avgEnergy"].append(np.nanmean(avgEnergy))
		summary["pdr"].append(np.nanmean(pdr))
	return summary


if __name__ == "__main__":
	runBatch([10, 20, 50, 100, 200], 10)
