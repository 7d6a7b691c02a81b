from tests.test_utils.factories.config import FingerprintConfigFactory

__all__ = ["FingerprintConfigFactory"]
