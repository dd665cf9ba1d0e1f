import numpy as np

### Terrain generation ###
TERRAIN_SIDE = 1000  # side of the square terrain in m
NR_NODES = 50  # number of nodes placed by the terrain generator
GW_HEIGHT = 10  # height of the gateway in m, placed in the middle of the terrain
### End of terrain generation ###

### Traffic ###
DATA_MIN = 500  # minimum amount of data per node in bytes
DATA_RANGE = 1000  # each node gets DATA_MIN + randint(DATA_RANGE) bytes
PAYLOAD = np.array([100, 100, 100, 100, 100, 100])  # payload size per SF (7-12) in bytes
MAX_RETR = 0  # max number of retransmissions per packet
DUTY_CYCLE = 0.01  # radio duty-cycle restriction (1%)
MAX_VARIANCE = 2  # max variance between two successive transmissions after duty cycle in s
### End of traffic ###

### PHY parameters (normally no change needed) ###
BW = 500  # bandwidth in kHz: 125, 250 or 500
CR = 1  # coding rate 4/(4+CR)
NPREAM = 8  # number of preamble symbols
PTX = 7  # transmit power in dBm
GAMMA = 2.08  # path-loss exponent
D0 = 40.0  # reference distance in m
LPLD0 = 95  # path loss at reference distance in dB
VAR = 3.57  # shadowing variance
G = 0.5  # fraction of the variance used as shadowing margin
XS = VAR*G  # shadowing margin in dB, fixed per run
MINDIST = 0.001  # distance floor in m for the log-distance model
# sensitivity per SF, columns: SF, BW125, BW250, BW500
SENSMODEM = np.array([[7, -124, -122, -116],
                      [8, -127, -125, -119],
                      [9, -130, -128, -122],
                      [10, -133, -130, -125],
                      [11, -135, -132, -128],
                      [12, -137, -135, -129]])
# capture effect power thresholds in dB for non-orthogonal transmissions, [aggressor SF][victim SF]
CAPTURE_THRESHOLDS = np.array([[6, -16, -18, -19, -19, -20],
                               [-24, 6, -20, -22, -22, -22],
                               [-27, -27, 6, -23, -25, -25],
                               [-30, -30, -30, 6, -26, -28],
                               [-33, -33, -33, -33, 6, -29],
                               [-36, -36, -36, -36, -36, 6]])
### End of PHY parameters ###

### Energy ###
TX_CURRENT = 25  # current draw while transmitting in mA
VOLTAGE = 3.5  # supply voltage in V
PTX_W = TX_CURRENT * VOLTAGE / 1000  # power draw while transmitting in W
### End of energy ###

# Misc
SEED = 44  # random seed to use, None for OS entropy
VERBOSE = False
SAVE = True
# End of misc
