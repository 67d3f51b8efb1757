class BaseP2PAddrError(Exception):
    pass
