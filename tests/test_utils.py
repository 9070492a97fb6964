from decimal import Decimal

from django.test import SimpleTestCase

from intasend.constants import Currency
from intasend.exceptions import InvalidAmountError, InvalidPhoneNumberError, ValidationError
from intasend.utils.formatters import format_amount, format_currency, format_phone_number
from intasend.utils.validators import validate_amount, validate_currency, validate_phone_number


class ValidatePhoneNumberTest(SimpleTestCase):

    def test_accepted_formats(self):
        for phone in ('0712345678', '+254712345678', '254712345678', '712345678', '0712 345 678'):
            with self.subTest(phone=phone):
                self.assertEqual(validate_phone_number(phone), '254712345678')

    def test_wrong_length(self):
        with self.assertRaises(InvalidPhoneNumberError):
            validate_phone_number('07123456')

    def test_empty(self):
        with self.assertRaises(InvalidPhoneNumberError):
            validate_phone_number('')


class ValidateAmountTest(SimpleTestCase):

    def test_returns_decimal(self):
        self.assertEqual(validate_amount('10.50'), Decimal('10.50'))
        self.assertEqual(validate_amount(100), Decimal('100'))

    def test_rejects_bad_amounts(self):
        for amount in ('abc', '0', '-1', '10.001', 'NaN'):
            with self.subTest(amount=amount):
                with self.assertRaises(InvalidAmountError):
                    validate_amount(amount)

    def test_bounds(self):
        with self.assertRaises(InvalidAmountError):
            validate_amount('5', min_amount=10)
        with self.assertRaises(InvalidAmountError):
            validate_amount('150001', max_amount=150000)


class ValidateCurrencyTest(SimpleTestCase):

    def test_normalizes_case(self):
        self.assertIs(validate_currency('usd'), Currency.USD)

    def test_rejects_unsupported(self):
        with self.assertRaises(ValidationError):
            validate_currency('TZS')


class FormattersTest(SimpleTestCase):

    def test_format_phone_number(self):
        self.assertEqual(format_phone_number('0712345678'), '254712345678')
        self.assertEqual(format_phone_number('712345678', include_plus=True), '+254712345678')

    def test_format_amount(self):
        self.assertEqual(format_amount(Decimal('10')), '10.00')
        self.assertEqual(format_amount('junk'), '0.00')

    def test_format_currency(self):
        self.assertEqual(format_currency('1000', Currency.KES), 'KES 1,000.00')
        self.assertEqual(format_currency(None, 'USD'), 'USD 0.00')


class ValidatePhoneNumberPrefixTest(SimpleTestCase):

    def test_safaricom_and_airtel_prefixes(self):
        self.assertEqual(validate_phone_number('0112345678'), '254112345678')
        self.assertEqual(validate_phone_number('0712345678'), '254712345678')

    def test_non_mobile_numbers_rejected(self):
        for phone in ('123456789', '0812345678', '254212345678'):
            with self.subTest(phone=phone):
                with self.assertRaises(InvalidPhoneNumberError):
                    validate_phone_number(phone)
