"""Catalog of known pregnancy health claims.

Each record pairs English and Bangla trigger patterns with a verdict,
an explanation, safe advice and the signs that warrant clinical care.
The catalog is built once at import and never changes; declaration
order matters because earlier records win scoring ties.
"""

from __future__ import annotations

from typing import Iterator

from myth_buster.models import ClaimRecord, Verdict

CATALOG: tuple[ClaimRecord, ...] = (
    ClaimRecord(
        id="m1",
        claim="Is caffeine safe during pregnancy?",
        patterns=("coffee", "caffeine", "tea", "কফি", "ক্যাফেইন", "চা"),
        verdict=Verdict.DEPENDS,
        explanation=(
            "Moderate amounts of caffeine (less than 200mg per day) are generally "
            "considered safe. This is roughly one 12oz cup of coffee."
        ),
        safe_advice=(
            "Stick to one small cup a day",
            "Try decaf alternatives",
            "Check caffeine in sodas and chocolate",
        ),
        escalation_signs=(
            "Experience heart palpitations",
            "Have trouble sleeping despite low intake",
        ),
        source_label="ACOG Guidelines",
    ),
    ClaimRecord(
        id="m2",
        claim="Spicy food can cause miscarriage or induce labor.",
        patterns=("spicy food", "ঝাল খাবার", "spicy", "chili"),
        verdict=Verdict.FALSE,
        explanation=(
            "Spicy food is perfectly safe for the baby, though it might cause you "
            "significant heartburn or indigestion."
        ),
        safe_advice=(
            "Eat small portions",
            "Avoid lying down immediately after eating spicy food",
        ),
        escalation_signs=("Indigestion is accompanied by severe abdominal pain",),
        source_label="NHS UK",
    ),
    ClaimRecord(
        id="m3",
        claim="You should never sleep on your back after the first trimester.",
        patterns=("sleeping on back", "চিত হয়ে ঘুমানো", "sleep position", "ঘুমানোর পজিশন"),
        verdict=Verdict.TRUE,
        explanation=(
            "Sleeping on your back can compress the vena cava, reducing blood flow "
            "to the placenta. Left side is generally best."
        ),
        safe_advice=(
            "Use a pregnancy pillow for support",
            "Don't panic if you wake up on your back, just roll over",
        ),
        escalation_signs=("Feeling dizzy or breathless when lying flat",),
        source_label="Mayo Clinic",
    ),
    ClaimRecord(
        id="m4",
        claim="Dyeing your hair is dangerous for the baby.",
        patterns=("hair dye", "coloring hair", "চুলে রঙ", "হেয়ার ডাই"),
        verdict=Verdict.FALSE,
        explanation=(
            "Most research shows the chemicals in hair dye are not absorbed in "
            "large enough amounts to cause harm."
        ),
        safe_advice=(
            "Wait until the second trimester for extra peace of mind",
            "Ensure the room is well-ventilated",
        ),
        escalation_signs=("Experience an allergic reaction to the dye",),
        source_label="WebMD Health",
    ),
    ClaimRecord(
        id="m5",
        claim="Exercise is dangerous during pregnancy.",
        patterns=("exercise", "gym", "lifting", "ব্যায়াম", "জিম"),
        verdict=Verdict.FALSE,
        explanation=(
            "Regular, moderate exercise is actually highly recommended and can make "
            "labor easier and recovery faster."
        ),
        safe_advice=(
            "Keep intensity moderate (should be able to talk)",
            "Avoid contact sports",
            "Stay hydrated",
        ),
        escalation_signs=("Dizziness", "Vaginal bleeding", "Chest pain during activity"),
        source_label="CDC Guidelines",
    ),
    ClaimRecord(
        id="m6",
        claim="Flying is unsafe for pregnant women.",
        patterns=("flying", "airplane", "travel", "বিমানে ভ্রমণ", "ভ্রমণ"),
        verdict=Verdict.FALSE,
        explanation=(
            "Flying is generally safe up to 36 weeks if you have a low-risk "
            "pregnancy. Cabin pressure is not a risk."
        ),
        safe_advice=(
            "Walk every hour to prevent blood clots",
            "Wear compression socks",
            "Keep your medical records handy",
        ),
        escalation_signs=(
            "You have a history of blood clots",
            "Experiencing cramping while traveling",
        ),
        source_label="IATA Medical Manual",
    ),
    ClaimRecord(
        id="m7",
        claim="Morning sickness only happens in the morning.",
        patterns=("morning sickness", "বমি বমি ভাব", "vomiting", "nausea"),
        verdict=Verdict.FALSE,
        explanation=(
            "Nausea and vomiting can happen at any time of the day or night due "
            "to hormonal changes."
        ),
        safe_advice=(
            "Eat small, frequent meals",
            "Ginger tea or lozenges can help",
            "Keep crackers by your bedside",
        ),
        escalation_signs=(
            "Cannot keep any fluids down for 24 hours",
            "Significant weight loss",
        ),
        source_label="Healthline",
    ),
    ClaimRecord(
        id="m8",
        claim="Too many ultrasounds can harm the baby.",
        patterns=("ultrasound", "scan", "আল্ট্রাসাউন্ড", "স্ক্যান"),
        verdict=Verdict.FALSE,
        explanation=(
            "Ultrasounds use sound waves, not radiation. There is no evidence that "
            "diagnostic scans cause harm."
        ),
        safe_advice=(
            "Follow your doctor's recommended scan schedule",
            "Avoid 'keepsake' 3D/4D scans in non-medical facilities",
        ),
        escalation_signs=("You have concerns about a specific scan result",),
        source_label="FDA",
    ),
    ClaimRecord(
        id="m9",
        claim="Eating papaya causes miscarriage.",
        patterns=("papaya", "পেঁপে", "fruit"),
        verdict=Verdict.DEPENDS,
        explanation=(
            "Ripe papaya is safe. However, unripe or semi-ripe papaya contains "
            "latex which can trigger uterine contractions."
        ),
        safe_advice=(
            "Only eat fully yellow/orange, soft papaya",
            "Avoid green papaya salads during pregnancy",
        ),
        escalation_signs=("Experience cramping after consuming unripe fruit",),
        source_label="Nutrition Reviews",
    ),
    ClaimRecord(
        id="m10",
        claim="Severe heartburn means the baby will have lots of hair.",
        patterns=("heartburn", "hairy baby", "বুক জ্বালাপোড়া", "চুল"),
        verdict=Verdict.MIXED,
        explanation=(
            "While often dismissed as a myth, some studies suggest a link because "
            "the same hormones that cause heartburn also influence fetal hair growth."
        ),
        safe_advice=(
            "Eat smaller meals",
            "Avoid spicy/fatty foods before bed",
            "Sleep with your head elevated",
        ),
        escalation_signs=("Heartburn prevents eating or sleeping",),
        source_label="Johns Hopkins Study",
    ),
    ClaimRecord(
        id="m11",
        claim="You need to eat twice as much food when pregnant.",
        patterns=("eating for two", "double food", "বেশি খাওয়া"),
        verdict=Verdict.FALSE,
        explanation=(
            "You only need about 300 extra calories per day in the 2nd trimester "
            "and 450 in the 3rd. Quality matters more than quantity."
        ),
        safe_advice=(
            "Focus on nutrient-dense foods",
            "Include plenty of leafy greens and proteins",
        ),
        escalation_signs=("Rapid or no weight gain over several weeks",),
        source_label="Dietary Guidelines for Americans",
    ),
    ClaimRecord(
        id="m12",
        claim="You must get rid of your cat when you get pregnant.",
        patterns=("cats", "litter", "toxoplasmosis", "বিড়াল", "মল"),
        verdict=Verdict.FALSE,
        explanation=(
            "You don't need to lose your pet, but you must avoid the litter box. "
            "Cat feces can carry toxoplasmosis, which is dangerous."
        ),
        safe_advice=(
            "Have someone else change the litter",
            "If you must do it, wear gloves and a mask",
            "Wash hands thoroughly after petting",
        ),
        escalation_signs=("Flu-like symptoms after contact with cat waste",),
        source_label="CDC",
    ),
    ClaimRecord(
        id="m13",
        claim="Hot tubs and saunas are safe during pregnancy.",
        patterns=("hot tub", "sauna", "bath", "গরম পানি", "গোসল"),
        verdict=Verdict.FALSE,
        explanation=(
            "Raising your core body temperature above 101°F (38.3°C) for too long "
            "can cause birth defects, especially in the first trimester."
        ),
        safe_advice=(
            "Stick to warm (not hot) baths",
            "Limit time in warm water to 10-15 minutes",
        ),
        escalation_signs=("Feeling faint or overheated after a bath",),
        source_label="ACOG",
    ),
    ClaimRecord(
        id="m14",
        claim="Sex can hurt the baby.",
        patterns=("sex", "intercourse", "মিলন"),
        verdict=Verdict.FALSE,
        explanation=(
            "The baby is well-protected by the amniotic sac and the strong muscles "
            "of the uterus. Sex is safe unless your doctor says otherwise."
        ),
        safe_advice=(
            "Experiment with comfortable positions",
            "Talk to your partner about changes in libido",
        ),
        escalation_signs=(
            "Bleeding or fluid leakage after intercourse",
            "History of preterm labor",
        ),
        source_label="Planned Parenthood",
    ),
    ClaimRecord(
        id="m15",
        claim="Pineapple can cause labor or miscarriage.",
        patterns=("pineapple", "আনারস", "bromelain"),
        verdict=Verdict.FALSE,
        explanation=(
            "You would have to eat massive, unrealistic quantities of pineapple for "
            "the bromelain (enzyme) to have any effect on the cervix."
        ),
        safe_advice=(
            "Enjoy fresh pineapple in normal food amounts",
            "Great source of Vitamin C",
        ),
        escalation_signs=("Allergic reaction or severe digestive upset",),
        source_label="Medical News Today",
    ),
)

GENERAL_RESULT = ClaimRecord(
    id="general",
    claim="Unknown Statement",
    patterns=(),
    verdict=Verdict.DEPENDS,
    explanation=(
        "We couldn't find a specific match for this statement. Pregnancy health "
        "is complex and varies for everyone."
    ),
    safe_advice=(
        "Consult your primary healthcare provider",
        "Focus on a balanced diet and moderate activity",
        "Listen to your body's signals",
    ),
    escalation_signs=(
        "You have sharp pain or unusual bleeding",
        "You have a fever over 100.4°F",
        "You feel something is 'just not right'",
    ),
    source_label="Nurture Glow General Guidance",
)

_BY_ID = {record.id: record for record in CATALOG}


def iter_records() -> Iterator[ClaimRecord]:
    """Yield catalog records in declaration order."""
    return iter(CATALOG)


def get_record(record_id: str) -> ClaimRecord:
    """Look up a catalog record by id.

    Raises:
        KeyError: If no record has this id.
    """
    if record_id == GENERAL_RESULT.id:
        return GENERAL_RESULT
    return _BY_ID[record_id]
