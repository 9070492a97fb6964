"""
Management command to list and raise IntaSend refunds.
"""

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.constants import RefundReason
from intasend.exceptions import IntaSendException
from intasend.schemas import RefundRequest
from intasend.services.refund_service import RefundService
from intasend.utils.validators import validate_amount


class Command(BaseCommand):
    help = 'List refunds, show one refund, or raise a refund for an invoice'

    def add_arguments(self, parser):
        parser.add_argument('--chargeback-id', type=str, help='Show this refund')
        parser.add_argument('--invoice', type=str, help='Invoice ID to refund')
        parser.add_argument('--amount', type=str, help='Amount to refund')
        parser.add_argument(
            '--reason',
            type=str,
            default=RefundReason.OTHER.value,
            choices=[r.value for r in RefundReason],
            help='Refund reason (default: Other)'
        )
        parser.add_argument('--details', type=str, help='Free text explaining the refund')

    def handle(self, *args, **options):
        service = RefundService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend Refunds ===\n'))

        try:
            if options.get('invoice'):
                if not options.get('amount'):
                    raise CommandError('--amount is required with --invoice')

                refund = service.create(RefundRequest(
                    invoice=options['invoice'],
                    amount=validate_amount(options['amount']),
                    reason=options['reason'],
                    reason_details=options.get('details'),
                ))
                self.stdout.write(self.style.SUCCESS('✓ Refund raised'))
                self._write_refund(refund)
                return

            if options.get('chargeback_id'):
                self._write_refund(service.get(options['chargeback_id']))
                return

            refunds = service.list()
            self.stdout.write(f'{refunds.count} refund(s):')
            for refund in refunds.results:
                self._write_refund(refund)

        except IntaSendException as e:
            raise CommandError(f'Refund operation failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')

    def _write_refund(self, refund):
        self.stdout.write(
            f'  {refund.chargeback_id or "-"}: {refund.amount} '
            f'[{refund.status}] {refund.reason}'
        )
