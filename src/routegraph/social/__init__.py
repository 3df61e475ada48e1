from .network import AttributeNetwork, ConnectivityDetector

__all__ = ["AttributeNetwork", "ConnectivityDetector"]
