import math

from . import config as conf


class UnreachableNodeError(RuntimeError):
    def __init__(self, nodeid, dist):
        super().__init__('node {} is unreachable! ({} m from the gateway)'.format(nodeid, round(dist, 1)))
        self.nodeid = nodeid
        self.dist = dist


def bwIndex(bw):
    # column of the sensitivity table
    if bw == 125:
        return 1
    elif bw == 250:
        return 2
    elif bw == 500:
        return 3
    raise ValueError('Unsupported bandwidth {} kHz, use 125, 250 or 500.'.format(bw))


def airtime(sf, pl=None, cr=None, bw=None):
    """ Time on air in seconds of a packet with pl bytes of payload.
        pl defaults to the payload size of the SF, bw is given in kHz.
    """
    if pl is None:
        pl = conf.PAYLOAD[sf-7]
    if cr is None:
        cr = conf.CR
    if bw is None:
        bw = conf.BW
    H = 0      # implicit header disabled (H=0) or not (H=1)
    DE = 0     # low data rate optimization enabled (=1) or not (=0)

    if bw == 125 and sf in [11, 12]: # low data rate optimization
        DE = 1
    if sf == 6: # can only have implicit header with SF6
        H = 1

    Tsym = (2.0**sf)/bw
    Tpream = (conf.NPREAM + 4.25)*Tsym
    payloadSymbNB = 8 + max(math.ceil((8.0*pl-4.0*sf+28+16-20*H)/(4.0*(sf-2*DE)))*(cr+4), 0)
    Tpayload = payloadSymbNB * Tsym

    return (Tpream + Tpayload)/1000


def estimatePathLoss(dist):
    # Log-Distance model with a fixed shadowing margin
    dist = max(dist, conf.MINDIST)
    return conf.LPLD0 + 10*conf.GAMMA*math.log10(dist/conf.D0) + conf.XS


def rxPower(dist):
    return conf.PTX - estimatePathLoss(dist)


def maxDistance(sf, bw=None):
    # farthest distance at which a packet sent with sf is still above the sensitivity
    if bw is None:
        bw = conf.BW
    S = conf.SENSMODEM[sf-7][bwIndex(bw)]
    return conf.D0 * 10**((conf.PTX - S - conf.LPLD0 - conf.XS)/(10*conf.GAMMA))


def minSF(nodeid, dist):
    for sf in range(7, 13):
        if maxDistance(sf) > dist:
            return sf
    raise UnreachableNodeError(nodeid, dist)
