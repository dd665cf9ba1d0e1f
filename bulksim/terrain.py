""" Terrain files: node positions on a square terrain, with the gateway in the middle.

	Text format, as written by generateTerrain.py:
		# terrain map [100 x 100]
		# node coords: 1 [12.3 45.6] 2 [78.9 1.0] ...
		# generated with: generateTerrain.py 100 2
		# stats: nodes=2 terrain=10000.0m^2 node_sz=0.01m^2
	Only the 'node coords' and 'stats' lines are required, anything else is a comment.
"""
import math
import os
import re

import yaml

from . import config as conf

STATS_RE = re.compile(r'^# stats: (.*)')
TERRAIN_RE = re.compile(r'terrain=([0-9]+\.[0-9]+)m\^2')
COORDS_RE = re.compile(r'^# node coords: (.*)')
NODE_RE = re.compile(r'([0-9]+) \[([0-9]+\.[0-9]+) ([0-9]+\.[0-9]+)\]')
NODES_RE = re.compile(r'(?:[0-9]+ \[[0-9]+\.[0-9]+ [0-9]+\.[0-9]+\]\s*)+')


class TerrainFileError(ValueError):
	pass


def readTerrain(fname):
	""" Returns the terrain area in m^2 and a dict nodeid -> (x, y). """
	try:
		with open(fname, 'r') as file:
			lines = file.read().splitlines()
	except OSError as e:
		raise TerrainFileError('Error: could not open terrain file {}: {}'.format(fname, e.strerror)) from e

	terrain = None
	coords = None
	for line in lines:
		m = STATS_RE.match(line)
		if m:
			t = TERRAIN_RE.search(m.group(1))
			if t is None:
				raise TerrainFileError('Error: no terrain size in stats line of {}: {}'.format(fname, line))
			terrain = float(t.group(1))
			continue
		m = COORDS_RE.match(line)
		if m:
			nodes = NODE_RE.findall(m.group(1))
			if not nodes:
				raise TerrainFileError('Error: no node coordinates in {}: {}'.format(fname, line))
			if NODES_RE.fullmatch(m.group(1).strip()) is None:
				raise TerrainFileError('Error: malformed node coordinates in {}: {}'.format(fname, line))
			coords = {int(n): (float(x), float(y)) for n, x, y in nodes}
			if len(coords) != len(nodes):
				raise TerrainFileError('Error: duplicate node ids in {}'.format(fname))

	if terrain is None:
		raise TerrainFileError('Error: terrain file {} has no "# stats:" line.'.format(fname))
	if coords is None:
		raise TerrainFileError('Error: terrain file {} has no "# node coords:" line.'.format(fname))
	return terrain, coords


def gatewayPosition(terrain):
	side = math.sqrt(terrain)
	return side/2, side/2, conf.GW_HEIGHT


def genTerrain(side, nrNodes, rng):
	""" Places nrNodes on a 0.1 m grid in a side x side terrain, at most one node per point. """
	if side < 1:
		raise ValueError('grid side must be higher than 1 meters!')
	if nrNodes < 1:
		raise ValueError('number of nodes must be higher than 1!')
	if nrNodes > int(side*10)**2:
		raise ValueError('cannot place {} nodes on a {} m grid.'.format(nrNodes, side))

	coords = {}
	taken = set()
	for n in range(1, nrNodes+1):
		x, y = rng.integers(0, int(side*10), size=2)
		while (x, y) in taken:
			x, y = rng.integers(0, int(side*10), size=2)
		taken.add((x, y))
		coords[n] = (int(x)/10, int(y)/10)
	return coords


def writeTerrain(file, side, coords, generatedWith=None):
	# file is an open text file, e.g. sys.stdout
	file.write('# terrain map [{} x {}]\n'.format(int(side), int(side)))
	file.write('# node coords:')
	for n in sorted(coords):
		file.write(' {} [{:.1f} {:.1f}]'.format(n, coords[n][0], coords[n][1]))
	file.write('\n')
	if generatedWith is not None:
		file.write('# generated with: {}\n'.format(generatedWith))
	file.write('# stats: nodes={} terrain={:.1f}m^2 node_sz={:.2f}m^2\n'.format(len(coords), side*side, 0.1*0.1))


def saveNodeConfig(terrain, coords, fname='nodeConfig.yaml'):
	if not os.path.isdir("out"):
		os.mkdir("out")
	nodeDict = {'terrain': float(terrain),
		'nodes': {int(n): {'x': float(x), 'y': float(y)} for n, (x, y) in coords.items()}}
	with open(os.path.join("out", fname), 'w') as file:
		yaml.dump(nodeDict, file)
	return os.path.join("out", fname)


def readNodeConfig(fname):
	try:
		with open(fname, 'r') as file:
			config = yaml.safe_load(file)
	except OSError as e:
		raise TerrainFileError('Error: could not open node configuration {}: {}'.format(fname, e.strerror)) from e
	except yaml.YAMLError as e:
		raise TerrainFileError('Error: node configuration {} is not valid YAML: {}'.format(fname, e)) from e
	try:
		terrain = float(config['terrain'])
		coords = {int(n): (float(c['x']), float(c['y'])) for n, c in config['nodes'].items()}
	except (TypeError, KeyError, ValueError, AttributeError) as e:
		raise TerrainFileError('Error: malformed node configuration {}: {}'.format(fname, e)) from e
	if not coords:
		raise TerrainFileError('Error: node configuration {} has no nodes.'.format(fname))
	return terrain, coords
