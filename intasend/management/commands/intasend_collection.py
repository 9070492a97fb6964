"""
Management command to run an M-Pesa STK Push collection against IntaSend.
"""

import time
import uuid

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.exceptions import IntaSendException
from intasend.schemas import MpesaStkPushRequest, StkPushStatusRequest
from intasend.services.collection_service import CollectionService
from intasend.utils.formatters import format_currency
from intasend.utils.validators import validate_amount


class Command(BaseCommand):
    help = 'Send an M-Pesa STK Push, or check the status of an existing collection'

    def add_arguments(self, parser):
        parser.add_argument(
            '--phone',
            type=str,
            help='Payer phone number (e.g., 254712345678)'
        )
        parser.add_argument(
            '--amount',
            type=str,
            help='Amount to collect in KES'
        )
        parser.add_argument(
            '--reference',
            type=str,
            help='api_ref for the collection (auto-generated if not provided)'
        )
        parser.add_argument(
            '--wallet-id',
            type=str,
            help='Wallet to credit (defaults to the settlement wallet)'
        )
        parser.add_argument(
            '--invoice',
            type=str,
            help='Only check the status of this invoice ID'
        )
        parser.add_argument(
            '--wait',
            type=int,
            default=0,
            help='Seconds to wait before checking status of a new push (default: 0, no check)'
        )

    def handle(self, *args, **options):
        service = CollectionService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend M-Pesa Collection ===\n'))

        try:
            invoice_id = options.get('invoice')

            if not invoice_id:
                if not options.get('phone') or not options.get('amount'):
                    raise CommandError('--phone and --amount are required unless --invoice is given')

                amount = validate_amount(options['amount'])
                reference = options.get('reference') or f"TEST-{uuid.uuid4().hex[:8].upper()}"

                self.stdout.write('Sending STK Push...')
                self.stdout.write(f"  Phone: {options['phone']}")
                self.stdout.write(f"  Amount: {format_currency(amount, 'KES')}")
                self.stdout.write(f'  Reference: {reference}\n')

                response = service.mpesa_stk_push(MpesaStkPushRequest(
                    amount=amount,
                    phone_number=options['phone'],
                    api_ref=reference,
                    wallet_id=options.get('wallet_id'),
                ))

                if response.invoice is None:
                    raise CommandError('Gateway accepted the push but returned no invoice')

                invoice_id = response.invoice.invoice_id
                self.stdout.write(self.style.SUCCESS('\n✓ STK Push sent'))
                self.stdout.write(f'  Invoice ID: {invoice_id}')
                self.stdout.write(f'  State: {response.invoice.state}')

                if options['wait'] <= 0:
                    self.stdout.write(
                        f'\nTo check status later, run:\n'
                        f'  python manage.py intasend_collection --invoice {invoice_id}'
                    )
                    return

                self.stdout.write(f"\nWaiting {options['wait']}s for the payer...")
                time.sleep(options['wait'])

            status = service.status(StkPushStatusRequest(invoice_id=invoice_id))
            invoice = status.invoice

            self.stdout.write(self.style.SUCCESS('\nCollection Status:'))
            self.stdout.write(f'  Invoice ID: {invoice_id}')
            if invoice:
                state_style = self.style.SUCCESS if invoice.state == 'COMPLETE' else self.style.WARNING
                self.stdout.write(f'  State: {state_style(invoice.state)}')
                self.stdout.write(f'  Value: {format_currency(invoice.value, invoice.currency or "KES")}')
                if invoice.mpesa_reference:
                    self.stdout.write(f'  M-Pesa Reference: {invoice.mpesa_reference}')
                if invoice.failed_reason:
                    self.stdout.write(self.style.ERROR(f'  Failed: {invoice.failed_reason}'))

        except IntaSendException as e:
            raise CommandError(f'Collection failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')
