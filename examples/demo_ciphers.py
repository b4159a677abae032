"""
classical_crypto — Live Demo: Caesar, Vigenère, Hill
=====================================================
Run:  python examples/demo_ciphers.py

Shows every cipher encrypting and decrypting a real message, and walks
through the Hill cipher's key checks and padding behaviour.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_crypto.ciphers.caesar   import CaesarCipher
from classical_crypto.ciphers.vigenere import VigenereCipher
from classical_crypto.ciphers.hill     import HillCipher
from classical_crypto.errors           import InvalidKey, InvalidInput

LINE = "═" * 70
MSG  = "Attack at dawn, hold the bridge."


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    logging.basicConfig(level=logging.INFO, format=" %(message)s")

    print(f"\n{LINE}")
    print("  classical_crypto — Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    # ── Caesar ───────────────────────────────────────────────────────────────
    header("MONOALPHABETIC — Caesar (shift 3)")
    c  = CaesarCipher(3)
    ct = c.encrypt(MSG)
    ok("Encrypted", ct)
    ok("Decrypted", c.decrypt(ct))

    # ── Vigenère ─────────────────────────────────────────────────────────────
    header("POLYALPHABETIC — Vigenère (key LEMON)")
    v  = VigenereCipher("LEMON")
    ct = v.encrypt(MSG)
    ok("Keystream", v.keystream(MSG))
    ok("Encrypted", ct)
    ok("Decrypted", v.decrypt(ct))

    # ── Hill ─────────────────────────────────────────────────────────────────
    header("POLYGRAPHIC — Hill (3x3 key from phrase CEFJCBDRH)")
    h = HillCipher.from_phrase("CEFJCBDRH", 3)
    ok("Key", h.key)
    ok("Inverse key mod 26", h.inverse_key())

    letters = "".join(ch for ch in MSG if ch.isalpha())
    pad     = h.padding_for(letters)
    ct      = h.encrypt(letters)
    pt      = h.decrypt(ct)
    ok("Letters only", letters)
    ok("Encrypted", f"{ct} ({pad} filler letter(s) added)")
    ok("Decrypted", pt)
    ok("Padding stripped", pt[:len(pt) - pad])

    for label, key in [("non-square", [[1, 2, 3], [4, 5, 6]]),
                       ("singular", [[2, 2, 3], [6, 6, 9], [1, 4, 8]]),
                       ("det shares factor with 26", [[1, 2], [3, 4]])]:
        try:
            HillCipher(key)
        except InvalidKey as e:
            ok(f"Rejected {label} key", e)

    try:
        h.encrypt(MSG)
    except InvalidInput as e:
        ok("Rejected message with spaces", e)

    print(f"\n{LINE}")
    print("  None of these ciphers are secure. Educational use only.")
    print(f"{LINE}\n")


if __name__ == "__main__":
    main()
