"""Tests for the VAPID key generator."""

import base64

from stockalert.push.vapid import generate_vapid_keys, main


def _b64url_decode(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


class TestGenerateVapidKeys:
    def test_public_key_is_uncompressed_p256_point(self):
        public_key, _ = generate_vapid_keys()
        raw = _b64url_decode(public_key)
        assert len(raw) == 65
        assert raw[0] == 0x04

    def test_private_key_is_32_bytes(self):
        _, private_key = generate_vapid_keys()
        assert len(_b64url_decode(private_key)) == 32

    def test_keys_are_unpadded_base64url(self):
        public_key, private_key = generate_vapid_keys()
        for key in (public_key, private_key):
            assert "=" not in key
            assert "+" not in key
            assert "/" not in key

    def test_each_call_generates_a_new_pair(self):
        assert generate_vapid_keys() != generate_vapid_keys()


def test_main_prints_env_lines(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("VAPID_PUBLIC_KEY=")
    assert lines[1].startswith("VAPID_PRIVATE_KEY=")
    assert len(lines) == 2
