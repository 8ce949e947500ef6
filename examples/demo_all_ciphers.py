"""
shadowstream — Live Demo: every registered cipher
=================================================
Run:  python examples/demo_all_ciphers.py

Encrypts a message in uneven fragments, decrypts it in different
fragments, and prints key size, IV size and timing for each algorithm.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shadowstream import available_ciphers, generate_key, new_cipher

LINE  = "═" * 70
MSG   = b"Packets arrive in whatever sizes the network feels like. " * 20
SPLIT = [1, 7, 64, 13, 200, 3]


def push(stream, data, sizes):
    out, pos, i = [], 0, 0
    while pos < len(data):
        n = sizes[i % len(sizes)]
        out.append(stream.update(data[pos:pos + n]))
        pos += n
        i   += 1
    return b"".join(out)


print(f"\n{LINE}")
print("  shadowstream — Stream Cipher Demo")
print(LINE)
print(f"  Message: {len(MSG)} bytes, fragments {SPLIT}\n")

passed = skipped = 0
for name in available_ciphers():
    key = generate_key(name)
    try:
        cipher = new_cipher(name, key)
    except RuntimeError as e:          # libsodium missing
        print(f"  -  {name:<20} skipped: {str(e).splitlines()[0]}")
        skipped += 1
        continue
    iv = cipher.generate_iv()
    t0 = time.perf_counter()
    ct = push(cipher.encrypter(iv), MSG, SPLIT)
    pt = push(cipher.decrypter(iv), ct, list(reversed(SPLIT)))
    elapsed = time.perf_counter() - t0
    mark = "✓" if pt == MSG else "✗"
    print(f"  {mark}  {name:<20} key={len(key):>2}  iv={cipher.iv_size:>2}  {elapsed*1000:7.2f} ms")
    passed += pt == MSG

print(LINE)
print(f"  {passed} round-tripped  |  {skipped} skipped")
print(LINE + "\n")
