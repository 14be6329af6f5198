from crc_lab.protocol.division import division_steps
from crc_lab.protocol.registry import get_config
from crc_lab.solver import solve_encoding, solve_error_detection


if __name__ == "__main__":
    cfg = get_config("CRC-8")
    rep = solve_encoding("B1D", cfg)

    print(f"{cfg.name}  G(z) = {cfg.formula}  ({cfg.binary_repr})")
    print(f"data     = {rep.data_bits}  ({rep.data_hex}h)")
    print(f"crc      = {rep.crc_bits}  ({rep.crc_hex}h)")
    print(f"codeword = {rep.codeword_bits}  ({rep.codeword_hex}h)")
    print(f"length   = {rep.codeword_length} bits ({rep.data_length} data + {cfg.width} CRC)")

    print()
    for s in division_steps(rep.data_bits + "0" * cfg.width, cfg.polynomial, cfg.width):
        print(f"step {s.step:02d}: reg={s.register}  {s.operation}")

    print()
    res = solve_error_detection(rep.codeword_bits, "2,3,4", cfg)
    verdict = "error detected" if res.detected else "valid"
    print(f"corrupted = {res.corrupted}  remainder = {res.remainder}  -> {verdict}")
