from swisscut.models.pairing.pairing_result import PairingResult

__all__ = ["PairingResult"]
