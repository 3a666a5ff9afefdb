"""Resource type tokens understood by the provisioning backends."""

from typing import Final

PROJECT_SERVICE: Final[str] = "gcp:projects/service:Service"
NETWORK: Final[str] = "gcp:compute/network:Network"
SUBNETWORK: Final[str] = "gcp:compute/subnetwork:Subnetwork"
FIREWALL: Final[str] = "gcp:compute/firewall:Firewall"
SERVICE_ACCOUNT: Final[str] = "gcp:serviceaccount/account:Account"
KEY_RING: Final[str] = "gcp:kms/keyRing:KeyRing"
CRYPTO_KEY: Final[str] = "gcp:kms/cryptoKey:CryptoKey"
MANAGED_ZONE: Final[str] = "gcp:dns/managedZone:ManagedZone"
RECORD_SET: Final[str] = "gcp:dns/recordSet:RecordSet"

# Kinds whose GCP resource accepts a `labels` argument
LABELED_KINDS: Final[frozenset[str]] = frozenset({CRYPTO_KEY, MANAGED_ZONE})
