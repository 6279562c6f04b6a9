from cryptonum.RSA.rsa import generate_keypair, encrypt, decrypt, sign, verify

__all__ = ['generate_keypair', 'encrypt', 'decrypt', 'sign', 'verify']
