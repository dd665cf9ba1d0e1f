import os
import sys

import numpy as np

from . import config as conf
from .terrain import TerrainFileError, readNodeConfig, readTerrain


USAGE = "Usage: ./bulkLora.py terrain_file [--seed N] [--verbose]\n" \
	"       ./bulkLora.py --from-file [file_name] [--seed N] [--verbose]"


def getParams(args):
	args = list(args[1:])
	if '--verbose' in args:
		conf.VERBOSE = True
		args.remove('--verbose')
	if '--seed' in args:
		i = args.index('--seed')
		if i+1 >= len(args) or not (args[i+1].isdigit() or args[i+1].lower() == 'none'):
			print(USAGE)
			sys.exit(1)
		conf.SEED = None if args[i+1].lower() == 'none' else int(args[i+1])
		del args[i:i+2]
	if len(args) < 1 or len(args) > 2:
		print(USAGE)
		sys.exit(1)

	try:
		if args[0] == '--from-file':
			if len(args) > 1:
				string = args[1]
			else:
				string = 'nodeConfig.yaml'
			terrain, coords = readNodeConfig(os.path.join("out", string))
		elif len(args) == 1:
			terrain, coords = readTerrain(args[0])
		else:
			print(USAGE)
			sys.exit(1)
	except TerrainFileError as e:
		print(e)
		sys.exit(1)

	print("Number of nodes:", len(coords))
	print("Terrain side (m):", round(np.sqrt(terrain), 1))
	print("Bandwidth (kHz):", conf.BW)
	print("Max retransmissions:", conf.MAX_RETR)
	print("Seed:", conf.SEED)
	return terrain, coords


def setBatch(simNr):
	conf.SEED = simNr
	conf.VERBOSE = False


def calcDist(x0, x1, y0, y1, z0=0, z1=0):
	return np.sqrt(((abs(x0-x1))**2)+((abs(y0-y1))**2)+((abs(z0-z1)**2)))


def verboseprint(*args, **kwargs):
	if conf.VERBOSE:
		print(*args, **kwargs)
