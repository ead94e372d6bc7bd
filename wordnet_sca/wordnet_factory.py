# wordnet_factory.py
import os
from .csv_adapter import CSVAdapter
from .wn_adapter import WNAdapter
from .wordnet_api import WordNetAPI


def _data_root() -> str:
    # WORDNET_SCA_DATA_DIR overrides the folder next to the package
    package_dir = os.path.dirname(os.path.abspath(__file__))
    return os.environ.get('WORDNET_SCA_DATA_DIR', os.path.join(package_dir, '..', 'data'))


class WordNetFactory:
    """Factory to create WordNetAPI instances based on version."""

    WORDNETS = {
        'princeton-3.0': {
            'adapter': CSVAdapter,
            'data_dir': 'wordnet',
            'must_exist': True,
        },
        'oewn:2024': {
            'adapter': WNAdapter,
            'data_dir': 'lexicons',
            'must_exist': False,  # wn downloads into it
        },
    }

    @staticmethod
    def versions() -> list:
        """Return all supported WordNet versions."""
        return list(WordNetFactory.WORDNETS.keys())

    @staticmethod
    def create(wn_version: str, **kwargs) -> WordNetAPI:
        """Create a WordNetAPI instance for the given version.

        Args:
            wn_version: WordNet version (e.g., 'princeton-3.0', 'oewn:2024').
            **kwargs: Additional arguments passed to the adapter (e.g., data_dir).

        Returns:
            WordNetAPI instance.

        Raises:
            ValueError: If version is not supported or data_dir is invalid.
        """
        config = WordNetFactory.WORDNETS.get(wn_version)
        if config is None:
            raise ValueError(f"Unsupported WordNet version: {wn_version}")

        # data_dir from kwargs if given, else the registry default under the data root
        data_dir = kwargs.pop('data_dir', None) or os.path.join(_data_root(), config['data_dir'])
        if config['must_exist'] and not os.path.exists(data_dir):
            raise ValueError(f"Data directory does not exist: {data_dir}")

        adapter_class = config['adapter']
        return adapter_class(wn_version, data_dir=data_dir, **kwargs)
