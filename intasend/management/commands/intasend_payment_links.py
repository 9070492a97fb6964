"""
Management command to list and create IntaSend payment links.
"""

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.constants import Tarrif
from intasend.exceptions import IntaSendException
from intasend.schemas import PaymentLinksCreateDetails, PaymentLinksUpdateDetails
from intasend.services.payment_link_service import PaymentLinkService
from intasend.utils.validators import validate_amount, validate_currency


class Command(BaseCommand):
    help = 'List payment links, or create / deactivate one'

    def add_arguments(self, parser):
        parser.add_argument('--create', type=str, metavar='TITLE', help='Create a link with this title')
        parser.add_argument('--amount', type=str, help='Fixed amount (open amount if omitted)')
        parser.add_argument(
            '--currency',
            type=str,
            default='KES',
            help='Currency code (default: KES)'
        )
        parser.add_argument('--usage-limit', type=int, help='Number of payments the link accepts')
        parser.add_argument(
            '--tarrif',
            type=str,
            choices=[t.value for t in Tarrif],
            help='Who pays the fees for mobile and card payments'
        )
        parser.add_argument('--deactivate', type=str, metavar='LINK_ID', help='Deactivate this link')

    def handle(self, *args, **options):
        service = PaymentLinkService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend Payment Links ===\n'))

        try:
            if options.get('create'):
                link = service.create(PaymentLinksCreateDetails(
                    title=options['create'],
                    currency=validate_currency(options['currency']),
                    amount=validate_amount(options['amount']) if options.get('amount') else None,
                    usage_limit=options.get('usage_limit'),
                    is_active=True,
                    mobile_tarrif=options.get('tarrif'),
                    card_tarrif=options.get('tarrif'),
                ))
                self.stdout.write(self.style.SUCCESS('✓ Payment link created'))
                self.stdout.write(f'  ID: {link.id}')
                self.stdout.write(f'  URL: {link.url}')
                return

            if options.get('deactivate'):
                current = service.details(options['deactivate'])
                link = service.update(current.id, PaymentLinksUpdateDetails(
                    title=current.title,
                    currency=current.currency or validate_currency(options['currency']),
                    amount=current.amount or None,
                    usage_limit=current.usage_limit or None,
                    is_active=False,
                    mobile_tarrif=current.mobile_tarrif,
                    card_tarrif=current.card_tarrif,
                    redirect_url=current.redirect_url,
                ))
                self.stdout.write(self.style.SUCCESS(f'✓ Payment link {link.id} deactivated'))
                return

            links = service.list()
            self.stdout.write(f'{links.count} payment link(s):')
            for link in links.results:
                state = self.style.SUCCESS('active') if link.is_active else self.style.WARNING('inactive')
                self.stdout.write(f'  {link.id} {link.title} [{state}] {link.url}')

        except IntaSendException as e:
            raise CommandError(f'Payment link operation failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')
