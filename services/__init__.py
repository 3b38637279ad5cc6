from services.address_lookup import AddressLookupClient
from services.mailer import EmailOptions, Mailer, MessageFormat, SMTPSettings, build_message

__all__ = [
    'AddressLookupClient',
    'EmailOptions',
    'Mailer',
    'MessageFormat',
    'SMTPSettings',
    'build_message',
]
