"""Pinned versions of the tools with convenience installers."""

GENERATE_VERSION = "0.5.0"
WASM_PACK_VERSION = "0.9.1"

CARGO_GENERATE = ("cargo-generate", "ashleygwilliams")
WASM_PACK = ("wasm-pack", "rustwasm")

PINNED_VERSIONS = {
    CARGO_GENERATE[0]: GENERATE_VERSION,
    WASM_PACK[0]: WASM_PACK_VERSION,
}
