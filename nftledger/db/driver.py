from nftledger.db.encoder import encode_kv, decode_kv, decode, make_key
from nftledger.logger import get_logger
from nftledger import config

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    """
    Raw key-value store handed to the ledger by its host. Keys are strings, values are
    any encodable python object. Setting a key to None deletes it.
    """
    def __init__(self):
        self.db = {}

    def _set_state(self, key, value):
        if value is None:
            self.__delitem__(key)
        else:
            k, v = encode_kv(key, value)
            self.db[k] = v

    def get(self, item: str):
        key = item.encode()
        res = self.db.get(key)
        if res is None:
            return None
        return decode(res)

    def set(self, key: str, value):
        self._set_state(key=key, value=value)

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def items(self, prefix=''):
        p = prefix.encode()
        return dict(decode_kv(k, v) for k, v in sorted(self.db.items()) if k.startswith(p))

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class CacheDriver:
    """
    Transactional layer over a raw driver. Writes made during an invocation are held in
    pending_writes and are visible to later reads in the same invocation. commit() pushes
    them to the raw driver, rollback() throws them away.
    """
    def __init__(self, driver=None):
        self.pending_writes = {}
        self.driver = driver if driver is not None else InMemDriver()
        self.log = get_logger('Driver')

    def get(self, key: str):
        # A pending None is a pending delete and hides the stored value
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def set(self, key, value):
        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        self.log.debug('Committing {} pending writes'.format(len(self.pending_writes)))

        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        self.pending_writes.clear()

    def rollback(self):
        if self.pending_writes:
            self.log.debug('Rolling back {} pending writes'.format(len(self.pending_writes)))

        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR

    def items(self, prefix=''):
        _items = {}

        for k in self.driver.iter(prefix=prefix):
            _items[k] = self.get(k)

        # Pending writes shadow the stored values, including pending deletes
        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                _items[k] = v

        return {k: v for k, v in sorted(_items.items()) if v is not None}

    def keys(self, prefix=''):
        return list(self.items(prefix).keys())

    def values(self, prefix=''):
        return list(self.items(prefix).values())

    def make_key(self, contract, variable, args=None):
        return make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=None):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=None, value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)

    def get_contract_keys(self, name):
        return self.keys(name + self.delimiter)

    def flush(self):
        self.driver.flush()
        self.clear_pending_state()
