"""
Management command to inspect and manage IntaSend wallets.
"""

import pydantic
from django.core.management.base import BaseCommand, CommandError

from intasend.exceptions import IntaSendException
from intasend.schemas import WalletCreateDetails, WalletIntraTransferRequest
from intasend.services.wallet_service import WalletService
from intasend.utils.formatters import format_currency
from intasend.utils.validators import validate_amount, validate_currency


class Command(BaseCommand):
    help = 'List wallets, show wallet transactions, create wallets and transfer between them'

    def add_arguments(self, parser):
        parser.add_argument('--wallet-id', type=str, help='Show this wallet and its transactions')
        parser.add_argument('--create', type=str, metavar='LABEL', help='Create a WORKING wallet')
        parser.add_argument(
            '--currency',
            type=str,
            default='KES',
            help='Currency of a new wallet (default: KES)'
        )
        parser.add_argument(
            '--can-disburse',
            action='store_true',
            help='Allow payouts from a new wallet'
        )
        parser.add_argument('--transfer-to', type=str, help='Destination wallet for a transfer from --wallet-id')
        parser.add_argument('--amount', type=str, help='Transfer amount')
        parser.add_argument('--narrative', type=str, default='Intra wallet transfer', help='Transfer narrative')

    def handle(self, *args, **options):
        service = WalletService()

        self.stdout.write(self.style.SUCCESS('\n=== IntaSend Wallets ===\n'))

        try:
            if options.get('create'):
                wallet = service.create(WalletCreateDetails(
                    currency=validate_currency(options['currency']),
                    label=options['create'],
                    can_disburse=options['can_disburse'],
                ))
                self.stdout.write(self.style.SUCCESS(f'✓ Wallet created: {wallet.wallet_id}'))
                return

            wallet_id = options.get('wallet_id')

            if options.get('transfer_to'):
                if not wallet_id or not options.get('amount'):
                    raise CommandError('--wallet-id and --amount are required with --transfer-to')

                result = service.intra_transfer(wallet_id, WalletIntraTransferRequest(
                    wallet_id=options['transfer_to'],
                    amount=validate_amount(options['amount']),
                    narrative=options['narrative'],
                ))
                self.stdout.write(self.style.SUCCESS('✓ Transfer complete'))
                for label, wallet in (('Origin', result.origin), ('Destination', result.destination)):
                    self.stdout.write(
                        f'  {label} {wallet.wallet_id}: '
                        f'{format_currency(wallet.available_balance, wallet.currency)}'
                    )
                return

            if wallet_id:
                wallet = service.details(wallet_id)
                self.stdout.write(f'Wallet {wallet.wallet_id} ({wallet.wallet_type}) {wallet.label or ""}')
                self.stdout.write(f'  Current: {format_currency(wallet.current_balance, wallet.currency)}')
                self.stdout.write(f'  Available: {format_currency(wallet.available_balance, wallet.currency)}')

                transactions = service.transactions(wallet_id)
                self.stdout.write(self.style.SUCCESS(f'\nTransactions ({transactions.count}):'))
                for txn in transactions.results:
                    self.stdout.write(
                        f'  {txn.transaction_id} {txn.trans_type} {txn.status} '
                        f'{format_currency(txn.amount, txn.currency)} {txn.narrative or ""}'
                    )
                return

            wallets = service.list()
            self.stdout.write(f'{wallets.count} wallet(s):')
            for wallet in wallets.results:
                self.stdout.write(
                    f'  {wallet.wallet_id} [{wallet.wallet_type}] {wallet.label or "-"}: '
                    f'{format_currency(wallet.available_balance, wallet.currency)}'
                )

        except IntaSendException as e:
            raise CommandError(f'Wallet operation failed: {e.message}')
        except pydantic.ValidationError as e:
            raise CommandError(f'Invalid input: {e.error_count()} error(s)\n{e}')
