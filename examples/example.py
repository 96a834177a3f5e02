import time

from octadis import Kind, decode, decode_program, disassemble_program, load_program

if __name__ == "__main__":
    program = bytes([
        0x00, 0xE0,  # clear screen
        0x6A, 0x02,  # VA = 2
        0xA2, 0x0A,  # I = 0x20A
        0xDA, 0xB5,  # draw 5-row sprite at (VA, VB)
        0xF3, 0x33,  # BCD of V3
        0x81, 0x28,  # unassigned ALU operation
        0x12, 0x00,  # jump to start
    ])

    for line in disassemble_program(program):
        print(line)

    memory = load_program(program)
    print("Instruction at 0x206:", decode(memory, 0x206).kind.name)

    # Whole 64K opcode space in one vectorized pass
    every_word = bytes(byte for word in range(0x10000) for byte in (word >> 8, word & 0xFF))

    start = time.time()
    instructions = decode_program(every_word, base_address=0)
    end = time.time()

    unknown = sum(1 for _, instruction in instructions if instruction.kind == Kind.UNKNOWN)
    print(f"Decoded {len(instructions)} words in {end - start:.3f}s, {unknown} unknown")
