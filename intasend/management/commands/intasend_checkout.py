"""
Management command to generate an IntaSend checkout link.
"""

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.constants import Provider
from intasend.exceptions import IntaSendException
from intasend.schemas import CheckoutDetailsRequest, CheckoutRequest
from intasend.services.checkout_service import CheckoutService
from intasend.utils.formatters import format_currency
from intasend.utils.validators import validate_amount, validate_currency


class Command(BaseCommand):
    help = 'Generate a checkout link, or look up an existing checkout'

    def add_arguments(self, parser):
        parser.add_argument('--amount', type=str, help='Checkout amount')
        parser.add_argument(
            '--currency',
            type=str,
            default='KES',
            help='Currency code (default: KES)'
        )
        parser.add_argument('--email', type=str, help='Customer email')
        parser.add_argument('--first-name', type=str, help='Customer first name')
        parser.add_argument('--last-name', type=str, help='Customer last name')
        parser.add_argument(
            '--method',
            type=str,
            choices=[p.value for p in Provider],
            help='Preselect a payment method'
        )
        parser.add_argument('--checkout-id', type=str, help='Look up this checkout instead')
        parser.add_argument('--signature', type=str, help='Signature of the checkout to look up')

    def handle(self, *args, **options):
        service = CheckoutService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend Checkout ===\n'))

        try:
            if options.get('checkout_id'):
                if not options.get('signature'):
                    raise CommandError('--signature is required with --checkout-id')

                details = service.details(CheckoutDetailsRequest(
                    checkout_id=options['checkout_id'],
                    signature=options['signature'],
                ))
                self.stdout.write(f'  ID: {details.id}')
                self.stdout.write(f'  URL: {details.url}')
                self.stdout.write(f'  Amount: {format_currency(details.amount, details.currency or "")}')
                paid_style = self.style.SUCCESS if details.paid else self.style.WARNING
                self.stdout.write(f"  Paid: {paid_style('yes' if details.paid else 'no')}")
                return

            if not options.get('amount'):
                raise CommandError('--amount is required')

            amount = validate_amount(options['amount'])
            currency = validate_currency(options['currency'])

            response = service.initiate(CheckoutRequest(
                amount=amount,
                currency=currency,
                email=options.get('email'),
                first_name=options.get('first_name'),
                last_name=options.get('last_name'),
                method=options.get('method'),
            ))

            self.stdout.write(self.style.SUCCESS('✓ Checkout link generated'))
            self.stdout.write(f'  Amount: {format_currency(response.amount, response.currency)}')
            self.stdout.write(f'  URL: {response.url}')
            self.stdout.write(f'  ID: {response.id}')
            self.stdout.write(f'  Signature: {response.signature}')

        except IntaSendException as e:
            raise CommandError(f'Checkout failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')
