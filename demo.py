from svctoken import KeyStore, TokenService, encode_subject, decode_subject, InvalidTokenError
from svctoken.logging import configure_logging
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import os
import tempfile

print("--- svctoken Live Demo ---")
configure_logging(level="debug")

# 1. Write a throwaway PKCS#1 key pair
tmpdir = tempfile.mkdtemp()
prv_path = os.path.join(tmpdir, "rsa_prv.key")
pub_path = os.path.join(tmpdir, "rsa_pub.key")
private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
with open(prv_path, "wb") as f:
    f.write(private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ))
with open(pub_path, "wb") as f:
    f.write(private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    ))
print(f"[+] Key pair written to {tmpdir}")

# 2. Issuer loads the signing key
issuer_store = KeyStore()
issuer_store.load_signing_key(prv_path)
issuer = TokenService(issuer_store)

# 3. Create a token for user + device
token, expires_at = issuer.create(encode_subject("user-42", "device-9"), "svc.billing", "1h")
print(f"[+] Token: {token[:32]}... (expires at {expires_at})")

# 4. Verifier only holds the public key
verifier_store = KeyStore()
verifier_store.load_verification_key(pub_path)
verifier = TokenService(verifier_store)

subject = verifier.verify(token, "svc.billing")
user_id, device_id = decode_subject(subject)
print(f"[+] Verified: user={user_id} device={device_id}")

# 5. Wrong audience is rejected
try:
    verifier.verify(token, "svc.shipping")
except InvalidTokenError as e:
    print(f"[+] Rejected for svc.shipping: {e}")

os.remove(prv_path)
os.remove(pub_path)
os.rmdir(tmpdir)
print("--- Demo Complete ---")
