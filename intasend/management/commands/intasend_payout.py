"""
Management command to send an IntaSend payout.
"""

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.constants import PayoutProvider
from intasend.exceptions import IntaSendException
from intasend.schemas import PayoutRequest, PayoutRequestTransaction, PayoutStatusRequest
from intasend.services.payout_service import PayoutService
from intasend.utils.formatters import format_currency
from intasend.utils.validators import validate_amount, validate_currency


class Command(BaseCommand):
    help = 'Initiate (and optionally approve) a single-transaction payout'

    def add_arguments(self, parser):
        parser.add_argument(
            '--account',
            type=str,
            help='Beneficiary phone number, paybill or bank account'
        )
        parser.add_argument('--amount', type=str, help='Payout amount')
        parser.add_argument(
            '--currency',
            type=str,
            default='KES',
            help='Currency code (default: KES)'
        )
        parser.add_argument(
            '--provider',
            type=str,
            default=PayoutProvider.MPESA_B2C.value,
            choices=[p.value for p in PayoutProvider],
            help='Payout channel (default: MPESA-B2C)'
        )
        parser.add_argument('--name', type=str, help='Beneficiary name')
        parser.add_argument('--bank-code', type=str, help='Bank code for PESALINK payouts')
        parser.add_argument('--narrative', type=str, help='Narrative shown to the beneficiary')
        parser.add_argument(
            '--approve',
            action='store_true',
            help='Approve the payout right after initiating it'
        )
        parser.add_argument(
            '--tracking-id',
            type=str,
            help='Only check the status of this payout'
        )
        parser.add_argument(
            '--bank-codes',
            action='store_true',
            help='List Kenyan bank codes and exit'
        )

    def handle(self, *args, **options):
        service = PayoutService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend Payout ===\n'))

        try:
            if options['bank_codes']:
                for bank in service.bank_codes_ke():
                    self.stdout.write(f'  {bank.bank_code}  {bank.bank_name}')
                return

            if options.get('tracking_id'):
                payout = service.status(PayoutStatusRequest(tracking_id=options['tracking_id']))
                self._write_payout(payout)
                return

            if not options.get('account') or not options.get('amount'):
                raise CommandError('--account and --amount are required')

            amount = validate_amount(options['amount'])
            currency = validate_currency(options['currency'])

            request = PayoutRequest(
                currency=currency,
                transactions=[PayoutRequestTransaction(
                    account=options['account'],
                    amount=amount,
                    name=options.get('name'),
                    bank_code=options.get('bank_code'),
                    narrative=options.get('narrative'),
                )],
            )

            self.stdout.write(f"Initiating {options['provider']} payout...")
            self.stdout.write(f"  Account: {options['account']}")
            self.stdout.write(f'  Amount: {format_currency(amount, currency)}\n')

            provider_calls = {
                PayoutProvider.MPESA_B2C.value: service.mpesa_b2c,
                PayoutProvider.MPESA_B2B.value: service.mpesa_b2b,
                PayoutProvider.PESALINK.value: service.bank,
                PayoutProvider.INTASEND.value: service.intasend,
                PayoutProvider.AIRTIME.value: service.airtime,
            }
            payout = provider_calls[options['provider']](request)
            self.stdout.write(self.style.SUCCESS('✓ Payout initiated'))
            self._write_payout(payout)

            if options['approve']:
                payout = service.approve(payout)
                self.stdout.write(self.style.SUCCESS('\n✓ Payout approved'))
                self._write_payout(payout)
            else:
                self.stdout.write(self.style.WARNING(
                    '\nNote: payout is waiting for approval. Re-run with --approve to send it immediately.'
                ))

        except IntaSendException as e:
            raise CommandError(f'Payout failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')

    def _write_payout(self, payout):
        self.stdout.write(f'  Tracking ID: {payout.tracking_id}')
        self.stdout.write(f'  Status: {payout.status} ({payout.status_code})')
        if payout.total_amount is not None:
            self.stdout.write(f'  Total: {payout.total_amount}')
        for txn in payout.transactions or []:
            self.stdout.write(f'    - {txn.account}: {txn.amount} [{txn.status}]')
