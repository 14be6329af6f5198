from crc_lab.analysis.hardware import register_layout
from crc_lab.analysis.injection import apply_error_vector
from crc_lab.analysis.undetectable import generate_undetectable_vector
from crc_lab.protocol.crc import encode, verify
from crc_lab.protocol.registry import REGISTRY


if __name__ == "__main__":
    for name, cfg in REGISTRY.items():
        vec = generate_undetectable_vector(cfg)
        cw = encode("10110011", cfg).codeword
        bad = apply_error_vector(cw, vec.vector)
        layout = register_layout(cfg)

        print(f"{name:10s} vector={vec.vector}  undetectable={vec.is_undetectable}")
        print(f"{'':10s} {cw} ^ vector -> valid={verify(bad, cfg).is_valid}")
        print(f"{'':10s} {layout.flip_flops} flip-flops, {layout.xor_gates} XOR gates, taps at {layout.taps}")
