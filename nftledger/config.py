import os

DELIMITER = ':'
INDEX_SEPARATOR = '.'

# Storage layout
OWNER_VAR = 'owner'
TOTAL_MINTED_VAR = 'total_minted'
ID_TO_OWNER_HASH = 'id_to_owner'
OWNER_TO_TOKEN_COUNT_HASH = 'owner_to_token_count'
APPROVALS_HASH = 'approvals'

CONTRACT_NAME = os.getenv('NFTLEDGER_CONTRACT', 'nftoken')

MAX_KEY_SIZE = 1024

# Leads the hex form of bytes hash keys and may not appear in str keys
BYTES_KEY_MARKER = '~'

# Token ids, balances and the minted counter are unsigned 64 bit
MAX_UINT64 = 2 ** 64 - 1

PRIVATE_METHOD_PREFIX = '_'

WEB_SERVER_HOST = '0.0.0.0'
WEB_SERVER_PORT = int(os.getenv('NFTLEDGER_PORT', 8080))
