#!/usr/bin/env python3
""" Creates a 2D terrain of nodes for bulkLora.py.
	Usage: ./generateTerrain.py [<terrain_side_size_(m)> [<num_of_nodes>]] [--yaml]
	Missing values are taken from TERRAIN_SIDE and NR_NODES in bulksim/config.py.
	The terrain is written to standard output, '--yaml' also saves it to out/nodeConfig.yaml.
"""
import sys

import numpy as np

from bulksim import config as conf
from bulksim.terrain import genTerrain, saveNodeConfig, writeTerrain


def main(args):
	save = '--yaml' in args
	args = [a for a in args if a != '--yaml']
	if len(args) > 3:
		print("usage: {} [<terrain_side_size_(m)> [<num_of_nodes>]] [--yaml]\ne.g. {} 100 20".format(args[0], args[0]))
		sys.exit(1)
	try:
		side = float(args[1]) if len(args) > 1 else conf.TERRAIN_SIDE
		nrNodes = int(args[2]) if len(args) > 2 else conf.NR_NODES
		coords = genTerrain(side, nrNodes, np.random.default_rng(conf.SEED))
	except ValueError as e:
		print(e)
		sys.exit(1)

	writeTerrain(sys.stdout, side, coords, " ".join(args))
	if save:
		print("# saved to", saveNodeConfig(side*side, coords), file=sys.stderr)


if __name__ == "__main__":
	main(sys.argv)
