from nftledger.db.driver import ContractDriver
from nftledger import config


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, t=None, default_value=None):
        self._type = None

        if isinstance(t, type):
            self._type = t

        self._default_value = default_value

        super().__init__(contract, name, driver=driver)

    def set(self, value):
        if self._type is not None and value is not None:
            assert isinstance(value, self._type), 'Wrong type passed to variable! Expected {}, got {}.'.format(
                self._type,
                type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)

        if value is None:
            return self._default_value

        return value


class Hash(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Add Python defaultdict behavior for easier bookkeeping
        if value is None:
            value = self._default_value

        return value

    @staticmethod
    def _key_str(k):
        if isinstance(k, (bytes, bytearray)):
            return config.BYTES_KEY_MARKER + bytes(k).hex()

        k = str(k)
        assert config.BYTES_KEY_MARKER not in k, 'Illegal marker in key.'
        return k

    def _validate_key(self, key):
        key = self._key_str(key)

        assert config.DELIMITER not in key, 'Illegal delimiter in key.'
        assert config.INDEX_SEPARATOR not in key, 'Illegal separator in key.'
        assert len(key) <= config.MAX_KEY_SIZE, 'Key is too long ({}). Max is {}.'.format(len(key), config.MAX_KEY_SIZE)
        return key

    def all(self):
        return self._driver.values(prefix='{}{}'.format(self._key, self._delimiter))

    def __contains__(self, key):
        key = self._validate_key(key)
        return self._driver.get('{}{}{}'.format(self._key, self._delimiter, key)) is not None

    def __setitem__(self, key, value):
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)

    def __delitem__(self, key):
        key = self._validate_key(key)
        self._set(key, None)
