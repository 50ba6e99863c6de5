from color_logic import generate_color_ramp, hex_to_rgb, rgb_to_hsl, hsl_to_rgb, rgb_to_hex

def test_logic():
    base = "#009EEC"
    print(f"Testing ramp for {base}")
    shades = generate_color_ramp(base)

    for shade in shades:
        h, s, l = shade.hsl
        print(f"  {shade.percentage:>3}%  {shade.hex}  hsl({h:.1f}, {s:.1f}%, {l:.1f}%)")

    assert [s.percentage for s in shades] == [120, 110, 100, 90, 80, 70, 60, 50, 40, 30, 20, 10]

    # Sanity check HSL conversion
    r, g, b = 255, 0, 0
    h, s, l = rgb_to_hsl(r, g, b)
    print(f"\nRed HSL: {h}, {s}, {l}") # Should be 0, 100, 50

    r2, g2, b2 = hsl_to_rgb(h, s, l)
    print(f"Red RGB back: {r2}, {g2}, {b2}")
    assert (r, g, b) == (r2, g2, b2)
    assert rgb_to_hex(*hex_to_rgb(base)) == base
    print("RGB->HSL->RGB cycle passed.")

if __name__ == "__main__":
    test_logic()
