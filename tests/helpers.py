"""
Helpers for faking IntaSend HTTP responses.
"""

import json
from unittest import mock

import requests


def mock_response(status_code=200, json_data=None, text=None):
    """Build a stand-in for requests.Response."""
    response = mock.Mock()
    response.status_code = status_code
    if json_data is not None:
        response.json.return_value = json_data
        response.text = json.dumps(json_data)
    else:
        response.json.side_effect = ValueError("Expecting value")
        response.text = text or ''
    response.content = response.text.encode('utf-8')
    return response


def patch_session(*responses):
    """
    Patch requests.Session.request to return ``responses`` in order.

    Exceptions in ``responses`` are raised instead of returned.
    """
    return mock.patch.object(requests.Session, 'request', side_effect=list(responses))


WALLET = {
    'wallet_id': 'Y7ELXJQ',
    'label': 'customer-42',
    'can_disburse': True,
    'currency': 'KES',
    'wallet_type': 'WORKING',
    'current_balance': '1500.00',
    'available_balance': '1200.50',
    'updated_at': '2024-02-21T18:04:43.412345+03:00',
}

INVOICE = {
    'invoice_id': 'RXX5P8R',
    'state': 'PENDING',
    'provider': 'M-PESA',
    'charges': '0.00',
    'net_amount': '10.00',
    'currency': 'KES',
    'value': '10.00',
    'account': '254712345678',
    'api_ref': 'TEST-1',
    'mpesa_reference': None,
    'host': 'https://sandbox.intasend.com',
    'card_info': {'bin_country': None, 'card_type': None},
    'retry_count': 0,
    'failed_reason': None,
    'failed_code': None,
    'failed_code_link': None,
    'created_at': '2024-02-21T18:04:43.412345+03:00',
    'updated_at': '2024-02-21T18:04:43.412345+03:00',
}

CUSTOMER = {
    'customer_id': 'KQ4MY9Q',
    'phone_number': '254712345678',
    'email': None,
    'first_name': None,
    'last_name': None,
    'country': None,
    'zipcode': None,
    'provider': 'M-PESA',
    'created_at': '2024-02-21T18:04:43.412345+03:00',
    'updated_at': '2024-02-21T18:04:43.412345+03:00',
}

PAYMENT_LINK = {
    'id': 'e4f6126d-b374-4edb-bf17-f9240d24d66e',
    'title': 'Donations',
    'is_active': True,
    'redirect_url': None,
    'amount': 100,
    'usage_limit': 1,
    'qrcode_file': None,
    'url': 'https://sandbox.intasend.com/pay/e4f6126d/',
    'currency': 'KES',
    'mobile_tarrif': 'BUSINESS-PAYS',
    'card_tarrif': 'CUSTOMER-PAYS',
    'created_at': '2024-02-21T18:04:43.412345+03:00',
    'updated_at': None,
}

TRANSACTION = {
    'transaction_id': 'XJQ7ELY',
    'amount': '10.00',
    'currency': 'KES',
    'value': '10.00',
    'running_balance': '1510.00',
    'narrative': 'Payment',
    'trans_type': 'SALE',
    'status': 'ON-HOLD',
    'created_at': '2024-02-21T18:04:43.412345+03:00',
    'updated_at': '2024-02-21T18:04:43.412345+03:00',
}

PAYOUT = {
    'file_id': 'Y3KLP0Q',
    'device_id': None,
    'tracking_id': '4bdf1d3a-1b8f-4a3b-8a1a-2c9a0a6b9f11',
    'batch_reference': 'BATCH-1',
    'status': 'Preview and approve',
    'status_code': 'BP103',
    'nonce': 'a1b2c3',
    'wallet': WALLET,
    'transactions': [{
        'status': 'Pending',
        'status_code': 'TP101',
        'request_reference_id': 'c1d2',
        'name': None,
        'account': '254712345678',
        'id_number': None,
        'bank_code': None,
        'amount': '20.00',
        'narrative': None,
    }],
    'charge_estimate': '0.00',
    'total_amount_estimate': '20.00',
    'total_amount': '20.00',
    'transactions_count': 1,
}
