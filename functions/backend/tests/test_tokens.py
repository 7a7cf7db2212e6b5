import base64
import unittest

from backend.tokens import ADMIN_PAYLOAD, sign_token, verify_token


class TokenTests(unittest.TestCase):
    def test_signed_admin_token_verifies(self):
        for secret in (b"k", b"another-secret", b"\x00\xff" * 16):
            token = sign_token(ADMIN_PAYLOAD, secret)
            self.assertTrue(verify_token(token, secret))

    def test_token_format(self):
        token = sign_token("admin", b"secret")
        encoded, signature = token.split(".")
        self.assertEqual(base64.b64decode(encoded), b"admin")
        self.assertEqual(len(signature), 64)
        int(signature, 16)

    def test_tampered_signature_is_rejected(self):
        token = sign_token(ADMIN_PAYLOAD, b"secret")
        last = "0" if token[-1] != "0" else "1"
        self.assertFalse(verify_token(token[:-1] + last, b"secret"))

    def test_wrong_secret_is_rejected(self):
        token = sign_token(ADMIN_PAYLOAD, b"k1")
        self.assertFalse(verify_token(token, b"k2"))

    def test_other_payload_is_rejected_even_if_signed(self):
        token = sign_token("guest", b"secret")
        self.assertFalse(verify_token(token, b"secret"))

    def test_malformed_tokens_are_rejected(self):
        secret = b"secret"
        good = sign_token(ADMIN_PAYLOAD, secret)
        for bad in (
            "",
            "not-a-token",
            good.replace(".", ""),
            good + ".extra",
            "!!!." + good.split(".")[1],
            "YWRtaW4=.zzé",
            None,
            12345,
        ):
            self.assertFalse(verify_token(bad, secret), bad)


if __name__ == "__main__":
    unittest.main()
