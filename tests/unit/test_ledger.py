from tests.utils import TokenStateTestCase, ALICE, BOB
from nftledger.token.ledger import Ledger, validate_token_id, validate_identity
from nftledger.exceptions import BalanceUnderflow, CounterOverflow, InvalidTokenId, InvalidIdentity


class TestValidateTokenId(TokenStateTestCase):
    def test_accepts_uint64_range(self):
        self.assertEqual(validate_token_id(0), 0)
        self.assertEqual(validate_token_id(2 ** 64 - 1), 2 ** 64 - 1)

    def test_rejects_out_of_range(self):
        with self.assertRaises(InvalidTokenId):
            validate_token_id(-1)

        with self.assertRaises(InvalidTokenId):
            validate_token_id(2 ** 64)

    def test_rejects_non_ints(self):
        for bad in ['1', 1.0, None, True]:
            with self.assertRaises(InvalidTokenId):
                validate_token_id(bad)


class TestLedger(TokenStateTestCase):
    def setUp(self):
        super().setUp()
        self.ledger = Ledger(self.state)

    def test_unknown_owner_is_none(self):
        self.assertIsNone(self.ledger.get_owner(1))

    def test_balance_defaults_to_zero(self):
        self.assertEqual(self.ledger.get_balance(ALICE), 0)

    def test_set_owner(self):
        self.ledger.set_owner(1, ALICE)
        self.assertEqual(self.ledger.get_owner(1), ALICE)

    def test_adjust_balance(self):
        self.assertEqual(self.ledger.adjust_balance(ALICE, 3), 3)
        self.assertEqual(self.ledger.adjust_balance(ALICE, -1), 2)
        self.assertEqual(self.ledger.get_balance(ALICE), 2)

    def test_adjust_balance_underflow(self):
        with self.assertRaises(BalanceUnderflow):
            self.ledger.adjust_balance(ALICE, -1)

        self.assertEqual(self.ledger.get_balance(ALICE), 0)

    def test_adjust_balance_overflow(self):
        self.ledger.adjust_balance(ALICE, 2 ** 64 - 1)

        with self.assertRaises(CounterOverflow):
            self.ledger.adjust_balance(ALICE, 1)

    def test_assign_creates_inclusive_range(self):
        self.ledger.assign(ALICE, 1, 3)

        self.assertEqual(self.ledger.get_owner(1), ALICE)
        self.assertEqual(self.ledger.get_owner(2), ALICE)
        self.assertEqual(self.ledger.get_owner(3), ALICE)
        self.assertIsNone(self.ledger.get_owner(4))
        self.assertEqual(self.ledger.get_balance(ALICE), 3)

    def test_move_pairs_owner_and_balances(self):
        self.ledger.assign(ALICE, 1, 2)
        self.ledger.move(ALICE, BOB, 2)

        self.assertEqual(self.ledger.get_owner(2), BOB)
        self.assertEqual(self.ledger.get_balance(ALICE), 1)
        self.assertEqual(self.ledger.get_balance(BOB), 1)

    def test_move_to_self_keeps_balance(self):
        self.ledger.assign(ALICE, 1, 1)
        self.ledger.move(ALICE, ALICE, 1)

        self.assertEqual(self.ledger.get_owner(1), ALICE)
        self.assertEqual(self.ledger.get_balance(ALICE), 1)

    def test_bytes_identities(self):
        owner = bytes.fromhex('00' * 32)
        self.ledger.assign(owner, 1, 1)

        self.assertEqual(self.ledger.get_owner(1), owner)
        self.assertEqual(self.ledger.get_balance(owner), 1)

    def test_owner_must_be_an_identity(self):
        self.ledger.assign(ALICE, 1, 1)

        for bad in [None, '', 7]:
            with self.assertRaises(InvalidIdentity):
                self.ledger.move(ALICE, bad, 1)

        self.assertEqual(self.ledger.get_owner(1), ALICE)
        self.assertEqual(self.ledger.get_balance(ALICE), 1)

    def test_bytes_identity_does_not_share_balance_with_hex_text(self):
        self.ledger.assign(b'\xab', 1, 1)

        self.assertEqual(self.ledger.get_balance(b'\xab'), 1)
        self.assertEqual(self.ledger.get_balance('ab'), 0)

        self.ledger.assign('ab', 2, 2)

        self.assertEqual(self.ledger.get_balance(b'\xab'), 1)
        self.assertEqual(self.ledger.get_balance('ab'), 2)

    def test_reserved_characters_rejected(self):
        self.ledger.assign(ALICE, 1, 1)

        for bad in ['x:y', 'x.y', '~ab']:
            with self.assertRaises(InvalidIdentity):
                self.ledger.move(ALICE, bad, 1)

            with self.assertRaises(InvalidIdentity):
                self.ledger.get_balance(bad)

        self.assertEqual(self.ledger.get_owner(1), ALICE)
        self.assertEqual(self.ledger.get_balance(ALICE), 1)


class TestValidateIdentity(TokenStateTestCase):
    def test_accepts_plain_str_and_bytes(self):
        self.assertEqual(validate_identity('alice'), 'alice')
        self.assertEqual(validate_identity(b'a:b.c~'), b'a:b.c~')

    def test_rejects_delimiters_in_str(self):
        for bad in ['a:b', 'a.b', 'a~b']:
            with self.assertRaises(InvalidIdentity):
                validate_identity(bad)
