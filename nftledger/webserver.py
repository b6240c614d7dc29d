from sanic import Sanic
from sanic.response import json, text
from nftledger.client import NFTokenClient
from nftledger.token.contract import NFToken
from nftledger.exceptions import LedgerError
from nftledger.db.encoder import encode
from nftledger.logger import get_logger
from nftledger import config
import json as _json

app = Sanic('nftledger')

client = NFTokenClient()
log = get_logger('Webserver')


def _contract(request):
    return request.args.get('contract', config.CONTRACT_NAME)


def _jsonable(value):
    # bytes identities and big ints go out in their storage encoding
    return _json.loads(encode(value))


@app.route("/", methods=["GET", ])
async def teapot(request):
    return text("I\'m a teapot", status=418)


@app.route('/total_minted', methods=['GET'])
async def get_total_minted(request):
    contract = client.get_contract(_contract(request))
    if contract is None:
        return json({'error': '{} does not exist'.format(_contract(request))}, status=404)

    return json({'total_minted': _jsonable(contract.total_minted())})


@app.route('/balances/<owner>', methods=['GET'])
async def get_balance(request, owner):
    contract = client.get_contract(_contract(request))
    if contract is None:
        return json({'error': '{} does not exist'.format(_contract(request))}, status=404)

    try:
        balance = contract.balance_of(owner=owner)
    except LedgerError as e:
        return json({'error': str(e)}, status=400)

    return json({'balance': balance})


@app.route('/tokens/<token_id:int>/owner', methods=['GET'])
async def get_token_owner(request, token_id):
    contract = client.get_contract(_contract(request))
    if contract is None:
        return json({'error': '{} does not exist'.format(_contract(request))}, status=404)

    try:
        owner = contract.owner_of(token_id=token_id)
    except LedgerError as e:
        return json({'error': str(e)}, status=400)

    if owner is None:
        return json({'owner': None}, status=404)

    return json({'owner': _jsonable(owner)})


@app.route('/tokens/<token_id:int>/approved/<candidate>', methods=['GET'])
async def get_is_approved(request, token_id, candidate):
    contract = client.get_contract(_contract(request))
    if contract is None:
        return json({'error': '{} does not exist'.format(_contract(request))}, status=404)

    try:
        approved = contract.is_approved(token_id=token_id, approved=candidate)
    except LedgerError as e:
        return json({'error': str(e)}, status=400)

    return json({'approved': approved})


# Expects {'sender': str, 'function': str, 'kwargs': dict, 'contract': str (optional)}
@app.route('/transactions', methods=['POST'])
async def submit_transaction(request):
    try:
        tx = request.json
    except Exception:
        tx = None

    if not isinstance(tx, dict):
        return json({'error': 'Malformed transaction'}, status=400)

    sender = tx.get('sender')
    function = tx.get('function')
    kwargs = tx.get('kwargs', {})
    contract = tx.get('contract', config.CONTRACT_NAME)

    if sender is None or not isinstance(kwargs, dict):
        return json({'error': 'Malformed transaction'}, status=400)

    if function not in NFToken.EXPORTS:
        return json({'error': '{} is not an exported function'.format(function)}, status=400)

    output = client.executor.execute(sender=sender,
                                     contract_name=contract,
                                     function_name=function,
                                     kwargs=kwargs)

    result = output['result']
    if output['status_code'] == 1:
        result = str(result)

    return json({
        'status_code': output['status_code'],
        'result': _jsonable(result),
        'events': _jsonable(output['events'])
    })


if __name__ == '__main__':
    log.info('Serving on {}:{}'.format(config.WEB_SERVER_HOST, config.WEB_SERVER_PORT))
    app.run(host=config.WEB_SERVER_HOST, port=config.WEB_SERVER_PORT, single_process=True)
