from studykit.summary import simplify

DOC = [
    "Yesterday afternoon something unusual happened nearby.",
    "Enzymes speed reactions inside living cells.",
    "Enzymes lower the activation energy of reactions.",
    "Cells produce enzymes for many reactions.",
    "Reactions in cells depend on enzymes.",
    "Enzymes and reactions drive cells forward.",
    "Quiet mornings remain pleasant for everyone involved.",
]


def test_bullets_follow_document_order_not_score():
    out = simplify(" ".join(DOC), "en")
    assert out == "**Key Takeaways (Extracted):**\n\n" + "\n\n".join("• " + s for s in DOC[1:6])


def test_at_most_five_bullets(biology):
    out = simplify(biology, "en")
    bullets = [line for line in out.splitlines() if line.startswith("• ")]
    assert len(bullets) == 5
    positions = [biology.index(b[2:]) for b in bullets]
    assert positions == sorted(positions)


def test_empty_document_gives_header_only():
    assert simplify("", "en") == "**Key Takeaways (Extracted):**\n\n"


def test_localized_header():
    assert simplify("", "zh").startswith("**主要要点（摘录）：**")
    assert simplify("", "fr").startswith("**Points Clés (Extraits) :**")
