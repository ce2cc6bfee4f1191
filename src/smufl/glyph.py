"""SMuFL glyph names.

Generated by ``scripts/generate_glyphs.py`` from the SMuFL ``glyphnames.json``
table; do not edit by hand.
"""

from __future__ import annotations

from enum import Enum


class Glyph(Enum):
    """Canonical SMuFL glyphs, valued by their registered names."""

    _4STRING_TAB_CLEF = "4stringTabClef"
    _6STRING_TAB_CLEF = "6stringTabClef"
    ACC_SAGITTAL11_LARGE_DIESIS_DOWN = "accSagittal11LargeDiesisDown"
    ACC_SAGITTAL11_LARGE_DIESIS_UP = "accSagittal11LargeDiesisUp"
    ACC_SAGITTAL11_MEDIUM_DIESIS_DOWN = "accSagittal11MediumDiesisDown"
    ACC_SAGITTAL11_MEDIUM_DIESIS_UP = "accSagittal11MediumDiesisUp"
    ACC_SAGITTAL11V19_LARGE_DIESIS_DOWN = "accSagittal11v19LargeDiesisDown"
    ACC_SAGITTAL11V19_LARGE_DIESIS_UP = "accSagittal11v19LargeDiesisUp"
    ACC_SAGITTAL11V19_MEDIUM_DIESIS_DOWN = "accSagittal11v19MediumDiesisDown"
    ACC_SAGITTAL11V19_MEDIUM_DIESIS_UP = "accSagittal11v19MediumDiesisUp"
    ACC_SAGITTAL11V49_COMMA_DOWN = "accSagittal11v49CommaDown"
    ACC_SAGITTAL11V49_COMMA_UP = "accSagittal11v49CommaUp"
    ACC_SAGITTAL143_COMMA_DOWN = "accSagittal143CommaDown"
    ACC_SAGITTAL143_COMMA_UP = "accSagittal143CommaUp"
    ACC_SAGITTAL17_COMMA_DOWN = "accSagittal17CommaDown"
    ACC_SAGITTAL17_COMMA_UP = "accSagittal17CommaUp"
    ACC_SAGITTAL17_KLEISMA_DOWN = "accSagittal17KleismaDown"
    ACC_SAGITTAL17_KLEISMA_UP = "accSagittal17KleismaUp"
    ACC_SAGITTAL19_COMMA_DOWN = "accSagittal19CommaDown"
    ACC_SAGITTAL19_COMMA_UP = "accSagittal19CommaUp"
    ACC_SAGITTAL19_SCHISMA_DOWN = "accSagittal19SchismaDown"
    ACC_SAGITTAL19_SCHISMA_UP = "accSagittal19SchismaUp"
    ACC_SAGITTAL1_MINA_DOWN = "accSagittal1MinaDown"
    ACC_SAGITTAL1_MINA_UP = "accSagittal1MinaUp"
    ACC_SAGITTAL1_TINA_DOWN = "accSagittal1TinaDown"
    ACC_SAGITTAL1_TINA_UP = "accSagittal1TinaUp"
    ACC_SAGITTAL23_COMMA_DOWN = "accSagittal23CommaDown"
    ACC_SAGITTAL23_COMMA_UP = "accSagittal23CommaUp"
    ACC_SAGITTAL23_SMALL_DIESIS_DOWN = "accSagittal23SmallDiesisDown"
    ACC_SAGITTAL23_SMALL_DIESIS_UP = "accSagittal23SmallDiesisUp"
    ACC_SAGITTAL25_SMALL_DIESIS_DOWN = "accSagittal25SmallDiesisDown"
    ACC_SAGITTAL25_SMALL_DIESIS_UP = "accSagittal25SmallDiesisUp"
    ACC_SAGITTAL2_MINAS_DOWN = "accSagittal2MinasDown"
    ACC_SAGITTAL2_MINAS_UP = "accSagittal2MinasUp"
    ACC_SAGITTAL2_TINAS_DOWN = "accSagittal2TinasDown"
    ACC_SAGITTAL2_TINAS_UP = "accSagittal2TinasUp"
    ACC_SAGITTAL35_LARGE_DIESIS_DOWN = "accSagittal35LargeDiesisDown"
    ACC_SAGITTAL35_LARGE_DIESIS_UP = "accSagittal35LargeDiesisUp"
    ACC_SAGITTAL35_MEDIUM_DIESIS_DOWN = "accSagittal35MediumDiesisDown"
    ACC_SAGITTAL35_MEDIUM_DIESIS_UP = "accSagittal35MediumDiesisUp"
    ACC_SAGITTAL49_LARGE_DIESIS_DOWN = "accSagittal49LargeDiesisDown"
    ACC_SAGITTAL49_LARGE_DIESIS_UP = "accSagittal49LargeDiesisUp"
    ACC_SAGITTAL49_MEDIUM_DIESIS_DOWN = "accSagittal49MediumDiesisDown"
    ACC_SAGITTAL49_MEDIUM_DIESIS_UP = "accSagittal49MediumDiesisUp"
    ACC_SAGITTAL49_SMALL_DIESIS_DOWN = "accSagittal49SmallDiesisDown"
    ACC_SAGITTAL49_SMALL_DIESIS_UP = "accSagittal49SmallDiesisUp"
    ACC_SAGITTAL55_COMMA_DOWN = "accSagittal55CommaDown"
    ACC_SAGITTAL55_COMMA_UP = "accSagittal55CommaUp"
    ACC_SAGITTAL5_COMMA_DOWN = "accSagittal5CommaDown"
    ACC_SAGITTAL5_COMMA_UP = "accSagittal5CommaUp"
    ACC_SAGITTAL5V11_SMALL_DIESIS_DOWN = "accSagittal5v11SmallDiesisDown"
    ACC_SAGITTAL5V11_SMALL_DIESIS_UP = "accSagittal5v11SmallDiesisUp"
    ACC_SAGITTAL5V13_LARGE_DIESIS_DOWN = "accSagittal5v13LargeDiesisDown"
    ACC_SAGITTAL5V13_LARGE_DIESIS_UP = "accSagittal5v13LargeDiesisUp"
    ACC_SAGITTAL5V13_MEDIUM_DIESIS_DOWN = "accSagittal5v13MediumDiesisDown"
    ACC_SAGITTAL5V13_MEDIUM_DIESIS_UP = "accSagittal5v13MediumDiesisUp"
    ACC_SAGITTAL5V19_COMMA_DOWN = "accSagittal5v19CommaDown"
    ACC_SAGITTAL5V19_COMMA_UP = "accSagittal5v19CommaUp"
    ACC_SAGITTAL5V23_SMALL_DIESIS_DOWN = "accSagittal5v23SmallDiesisDown"
    ACC_SAGITTAL5V23_SMALL_DIESIS_UP = "accSagittal5v23SmallDiesisUp"
    ACC_SAGITTAL5V7_KLEISMA_DOWN = "accSagittal5v7KleismaDown"
    ACC_SAGITTAL5V7_KLEISMA_UP = "accSagittal5v7KleismaUp"
    ACC_SAGITTAL7_COMMA_DOWN = "accSagittal7CommaDown"
    ACC_SAGITTAL7_COMMA_UP = "accSagittal7CommaUp"
    ACC_SAGITTAL7V11_COMMA_DOWN = "accSagittal7v11CommaDown"
    ACC_SAGITTAL7V11_COMMA_UP = "accSagittal7v11CommaUp"
    ACC_SAGITTAL7V11_KLEISMA_DOWN = "accSagittal7v11KleismaDown"
    ACC_SAGITTAL7V11_KLEISMA_UP = "accSagittal7v11KleismaUp"
    ACC_SAGITTAL7V19_COMMA_DOWN = "accSagittal7v19CommaDown"
    ACC_SAGITTAL7V19_COMMA_UP = "accSagittal7v19CommaUp"
    ACC_SAGITTAL_ACUTE = "accSagittalAcute"
    ACC_SAGITTAL_DOUBLE_FLAT = "accSagittalDoubleFlat"
    ACC_SAGITTAL_DOUBLE_SHARP = "accSagittalDoubleSharp"
    ACC_SAGITTAL_FLAT = "accSagittalFlat"
    ACC_SAGITTAL_FLAT11_LDOWN = "accSagittalFlat11LDown"
    ACC_SAGITTAL_FLAT11_LUP = "accSagittalFlat11LUp"
    ACC_SAGITTAL_FLAT11_MDOWN = "accSagittalFlat11MDown"
    ACC_SAGITTAL_FLAT11_MUP = "accSagittalFlat11MUp"
    ACC_SAGITTAL_FLAT25_SDOWN = "accSagittalFlat25SDown"
    ACC_SAGITTAL_FLAT25_SUP = "accSagittalFlat25SUp"
    ACC_SAGITTAL_FLAT35_LDOWN = "accSagittalFlat35LDown"
    ACC_SAGITTAL_FLAT35_LUP = "accSagittalFlat35LUp"
    ACC_SAGITTAL_FLAT35_MDOWN = "accSagittalFlat35MDown"
    ACC_SAGITTAL_FLAT35_MUP = "accSagittalFlat35MUp"
    ACC_SAGITTAL_FLAT5_CDOWN = "accSagittalFlat5CDown"
    ACC_SAGITTAL_FLAT5_CUP = "accSagittalFlat5CUp"
    ACC_SAGITTAL_FLAT5V7K_DOWN = "accSagittalFlat5v7kDown"
    ACC_SAGITTAL_FLAT5V7K_UP = "accSagittalFlat5v7kUp"
    ACC_SAGITTAL_FLAT7_CDOWN = "accSagittalFlat7CDown"
    ACC_SAGITTAL_FLAT7_CUP = "accSagittalFlat7CUp"
    ACC_SAGITTAL_GRAVE = "accSagittalGrave"
    ACC_SAGITTAL_SHAFT_DOWN = "accSagittalShaftDown"
    ACC_SAGITTAL_SHAFT_UP = "accSagittalShaftUp"
    ACC_SAGITTAL_SHARP = "accSagittalSharp"
    ACC_SAGITTAL_SHARP11_LDOWN = "accSagittalSharp11LDown"
    ACC_SAGITTAL_SHARP11_LUP = "accSagittalSharp11LUp"
    ACC_SAGITTAL_SHARP11_MDOWN = "accSagittalSharp11MDown"
    ACC_SAGITTAL_SHARP11_MUP = "accSagittalSharp11MUp"
    ACC_SAGITTAL_SHARP25_SDOWN = "accSagittalSharp25SDown"
    ACC_SAGITTAL_SHARP25_SUP = "accSagittalSharp25SUp"
    ACC_SAGITTAL_SHARP35_LDOWN = "accSagittalSharp35LDown"
    ACC_SAGITTAL_SHARP35_LUP = "accSagittalSharp35LUp"
    ACC_SAGITTAL_SHARP35_MDOWN = "accSagittalSharp35MDown"
    ACC_SAGITTAL_SHARP35_MUP = "accSagittalSharp35MUp"
    ACC_SAGITTAL_SHARP5_CDOWN = "accSagittalSharp5CDown"
    ACC_SAGITTAL_SHARP5_CUP = "accSagittalSharp5CUp"
    ACC_SAGITTAL_SHARP5V7K_DOWN = "accSagittalSharp5v7kDown"
    ACC_SAGITTAL_SHARP5V7K_UP = "accSagittalSharp5v7kUp"
    ACC_SAGITTAL_SHARP7_CDOWN = "accSagittalSharp7CDown"
    ACC_SAGITTAL_SHARP7_CUP = "accSagittalSharp7CUp"
    ACCDN_COMB_DOT = "accdnCombDot"
    ACCDN_COMB_LH2_RANKS_EMPTY = "accdnCombLH2RanksEmpty"
    ACCDN_COMB_LH3_RANKS_EMPTY_SQUARE = "accdnCombLH3RanksEmptySquare"
    ACCDN_COMB_RH3_RANKS_EMPTY = "accdnCombRH3RanksEmpty"
    ACCDN_COMB_RH4_RANKS_EMPTY = "accdnCombRH4RanksEmpty"
    ACCDN_DIATONIC_CLEF = "accdnDiatonicClef"
    ACCDN_LH2_RANKS16_ROUND = "accdnLH2Ranks16Round"
    ACCDN_LH2_RANKS8_PLUS16_ROUND = "accdnLH2Ranks8Plus16Round"
    ACCDN_LH2_RANKS8_ROUND = "accdnLH2Ranks8Round"
    ACCDN_LH2_RANKS_FULL_MASTER_ROUND = "accdnLH2RanksFullMasterRound"
    ACCDN_LH2_RANKS_MASTER_PLUS16_ROUND = "accdnLH2RanksMasterPlus16Round"
    ACCDN_LH2_RANKS_MASTER_ROUND = "accdnLH2RanksMasterRound"
    ACCDN_LH3_RANKS2_PLUS8_SQUARE = "accdnLH3Ranks2Plus8Square"
    ACCDN_LH3_RANKS2_SQUARE = "accdnLH3Ranks2Square"
    ACCDN_LH3_RANKS8_SQUARE = "accdnLH3Ranks8Square"
    ACCDN_LH3_RANKS_DOUBLE8_SQUARE = "accdnLH3RanksDouble8Square"
    ACCDN_LH3_RANKS_TUTTI_SQUARE = "accdnLH3RanksTuttiSquare"
    ACCDN_PULL = "accdnPull"
    ACCDN_PUSH = "accdnPush"
    ACCDN_RH3_RANKS_ACCORDION = "accdnRH3RanksAccordion"
    ACCDN_RH3_RANKS_AUTHENTIC_MUSETTE = "accdnRH3RanksAuthenticMusette"
    ACCDN_RH3_RANKS_BANDONEON = "accdnRH3RanksBandoneon"
    ACCDN_RH3_RANKS_BASSOON = "accdnRH3RanksBassoon"
    ACCDN_RH3_RANKS_CLARINET = "accdnRH3RanksClarinet"
    ACCDN_RH3_RANKS_DOUBLE_TREMOLO_LOWER8VE = "accdnRH3RanksDoubleTremoloLower8ve"
    ACCDN_RH3_RANKS_DOUBLE_TREMOLO_UPPER8VE = "accdnRH3RanksDoubleTremoloUpper8ve"
    ACCDN_RH3_RANKS_FULL_FACTORY = "accdnRH3RanksFullFactory"
    ACCDN_RH3_RANKS_HARMONIUM = "accdnRH3RanksHarmonium"
    ACCDN_RH3_RANKS_IMITATION_MUSETTE = "accdnRH3RanksImitationMusette"
    ACCDN_RH3_RANKS_LOWER_TREMOLO8 = "accdnRH3RanksLowerTremolo8"
    ACCDN_RH3_RANKS_MASTER = "accdnRH3RanksMaster"
    ACCDN_RH3_RANKS_OBOE = "accdnRH3RanksOboe"
    ACCDN_RH3_RANKS_ORGAN = "accdnRH3RanksOrgan"
    ACCDN_RH3_RANKS_PICCOLO = "accdnRH3RanksPiccolo"
    ACCDN_RH3_RANKS_TREMOLO_LOWER8VE = "accdnRH3RanksTremoloLower8ve"
    ACCDN_RH3_RANKS_TREMOLO_UPPER8VE = "accdnRH3RanksTremoloUpper8ve"
    ACCDN_RH3_RANKS_TWO_CHOIRS = "accdnRH3RanksTwoChoirs"
    ACCDN_RH3_RANKS_UPPER_TREMOLO8 = "accdnRH3RanksUpperTremolo8"
    ACCDN_RH3_RANKS_VIOLIN = "accdnRH3RanksViolin"
    ACCDN_RH4_RANKS_ALTO = "accdnRH4RanksAlto"
    ACCDN_RH4_RANKS_BASS_ALTO = "accdnRH4RanksBassAlto"
    ACCDN_RH4_RANKS_MASTER = "accdnRH4RanksMaster"
    ACCDN_RH4_RANKS_SOFT_BASS = "accdnRH4RanksSoftBass"
    ACCDN_RH4_RANKS_SOFT_TENOR = "accdnRH4RanksSoftTenor"
    ACCDN_RH4_RANKS_SOPRANO = "accdnRH4RanksSoprano"
    ACCDN_RH4_RANKS_TENOR = "accdnRH4RanksTenor"
    ACCDN_RICOCHET2 = "accdnRicochet2"
    ACCDN_RICOCHET3 = "accdnRicochet3"
    ACCDN_RICOCHET4 = "accdnRicochet4"
    ACCDN_RICOCHET5 = "accdnRicochet5"
    ACCDN_RICOCHET6 = "accdnRicochet6"
    ACCDN_RICOCHET_STEM2 = "accdnRicochetStem2"
    ACCDN_RICOCHET_STEM3 = "accdnRicochetStem3"
    ACCDN_RICOCHET_STEM4 = "accdnRicochetStem4"
    ACCDN_RICOCHET_STEM5 = "accdnRicochetStem5"
    ACCDN_RICOCHET_STEM6 = "accdnRicochetStem6"
    ACCIDENTAL_ARROW_DOWN = "accidentalArrowDown"
    ACCIDENTAL_ARROW_UP = "accidentalArrowUp"
    ACCIDENTAL_BAKIYE_FLAT = "accidentalBakiyeFlat"
    ACCIDENTAL_BAKIYE_SHARP = "accidentalBakiyeSharp"
    ACCIDENTAL_BRACKET_LEFT = "accidentalBracketLeft"
    ACCIDENTAL_BRACKET_RIGHT = "accidentalBracketRight"
    ACCIDENTAL_BUYUK_MUCENNEB_FLAT = "accidentalBuyukMucennebFlat"
    ACCIDENTAL_BUYUK_MUCENNEB_SHARP = "accidentalBuyukMucennebSharp"
    ACCIDENTAL_COMBINING_CLOSE_CURLY_BRACE = "accidentalCombiningCloseCurlyBrace"
    ACCIDENTAL_COMBINING_LOWER17_SCHISMA = "accidentalCombiningLower17Schisma"
    ACCIDENTAL_COMBINING_LOWER19_SCHISMA = "accidentalCombiningLower19Schisma"
    ACCIDENTAL_COMBINING_LOWER23_LIMIT29_LIMIT_COMMA = "accidentalCombiningLower23Limit29LimitComma"
    ACCIDENTAL_COMBINING_LOWER29_LIMIT_COMMA = "accidentalCombiningLower29LimitComma"
    ACCIDENTAL_COMBINING_LOWER31_SCHISMA = "accidentalCombiningLower31Schisma"
    ACCIDENTAL_COMBINING_LOWER37_QUARTERTONE = "accidentalCombiningLower37Quartertone"
    ACCIDENTAL_COMBINING_LOWER41_COMMA = "accidentalCombiningLower41Comma"
    ACCIDENTAL_COMBINING_LOWER43_COMMA = "accidentalCombiningLower43Comma"
    ACCIDENTAL_COMBINING_LOWER47_QUARTERTONE = "accidentalCombiningLower47Quartertone"
    ACCIDENTAL_COMBINING_LOWER53_LIMIT_COMMA = "accidentalCombiningLower53LimitComma"
    ACCIDENTAL_COMBINING_OPEN_CURLY_BRACE = "accidentalCombiningOpenCurlyBrace"
    ACCIDENTAL_COMBINING_RAISE17_SCHISMA = "accidentalCombiningRaise17Schisma"
    ACCIDENTAL_COMBINING_RAISE19_SCHISMA = "accidentalCombiningRaise19Schisma"
    ACCIDENTAL_COMBINING_RAISE23_LIMIT29_LIMIT_COMMA = "accidentalCombiningRaise23Limit29LimitComma"
    ACCIDENTAL_COMBINING_RAISE29_LIMIT_COMMA = "accidentalCombiningRaise29LimitComma"
    ACCIDENTAL_COMBINING_RAISE31_SCHISMA = "accidentalCombiningRaise31Schisma"
    ACCIDENTAL_COMBINING_RAISE37_QUARTERTONE = "accidentalCombiningRaise37Quartertone"
    ACCIDENTAL_COMBINING_RAISE41_COMMA = "accidentalCombiningRaise41Comma"
    ACCIDENTAL_COMBINING_RAISE43_COMMA = "accidentalCombiningRaise43Comma"
    ACCIDENTAL_COMBINING_RAISE47_QUARTERTONE = "accidentalCombiningRaise47Quartertone"
    ACCIDENTAL_COMBINING_RAISE53_LIMIT_COMMA = "accidentalCombiningRaise53LimitComma"
    ACCIDENTAL_COMMA_SLASH_DOWN = "accidentalCommaSlashDown"
    ACCIDENTAL_COMMA_SLASH_UP = "accidentalCommaSlashUp"
    ACCIDENTAL_DOUBLE_FLAT = "accidentalDoubleFlat"
    ACCIDENTAL_DOUBLE_FLAT_ARABIC = "accidentalDoubleFlatArabic"
    ACCIDENTAL_DOUBLE_FLAT_EQUAL_TEMPERED = "accidentalDoubleFlatEqualTempered"
    ACCIDENTAL_DOUBLE_FLAT_ONE_ARROW_DOWN = "accidentalDoubleFlatOneArrowDown"
    ACCIDENTAL_DOUBLE_FLAT_ONE_ARROW_UP = "accidentalDoubleFlatOneArrowUp"
    ACCIDENTAL_DOUBLE_FLAT_REVERSED = "accidentalDoubleFlatReversed"
    ACCIDENTAL_DOUBLE_FLAT_THREE_ARROWS_DOWN = "accidentalDoubleFlatThreeArrowsDown"
    ACCIDENTAL_DOUBLE_FLAT_THREE_ARROWS_UP = "accidentalDoubleFlatThreeArrowsUp"
    ACCIDENTAL_DOUBLE_FLAT_TURNED = "accidentalDoubleFlatTurned"
    ACCIDENTAL_DOUBLE_FLAT_TWO_ARROWS_DOWN = "accidentalDoubleFlatTwoArrowsDown"
    ACCIDENTAL_DOUBLE_FLAT_TWO_ARROWS_UP = "accidentalDoubleFlatTwoArrowsUp"
    ACCIDENTAL_DOUBLE_SHARP = "accidentalDoubleSharp"
    ACCIDENTAL_DOUBLE_SHARP_ARABIC = "accidentalDoubleSharpArabic"
    ACCIDENTAL_DOUBLE_SHARP_EQUAL_TEMPERED = "accidentalDoubleSharpEqualTempered"
    ACCIDENTAL_DOUBLE_SHARP_ONE_ARROW_DOWN = "accidentalDoubleSharpOneArrowDown"
    ACCIDENTAL_DOUBLE_SHARP_ONE_ARROW_UP = "accidentalDoubleSharpOneArrowUp"
    ACCIDENTAL_DOUBLE_SHARP_THREE_ARROWS_DOWN = "accidentalDoubleSharpThreeArrowsDown"
    ACCIDENTAL_DOUBLE_SHARP_THREE_ARROWS_UP = "accidentalDoubleSharpThreeArrowsUp"
    ACCIDENTAL_DOUBLE_SHARP_TWO_ARROWS_DOWN = "accidentalDoubleSharpTwoArrowsDown"
    ACCIDENTAL_DOUBLE_SHARP_TWO_ARROWS_UP = "accidentalDoubleSharpTwoArrowsUp"
    ACCIDENTAL_FILLED_REVERSED_FLAT_AND_FLAT = "accidentalFilledReversedFlatAndFlat"
    ACCIDENTAL_FILLED_REVERSED_FLAT_AND_FLAT_ARROW_DOWN = "accidentalFilledReversedFlatAndFlatArrowDown"
    ACCIDENTAL_FILLED_REVERSED_FLAT_AND_FLAT_ARROW_UP = "accidentalFilledReversedFlatAndFlatArrowUp"
    ACCIDENTAL_FILLED_REVERSED_FLAT_ARROW_DOWN = "accidentalFilledReversedFlatArrowDown"
    ACCIDENTAL_FILLED_REVERSED_FLAT_ARROW_UP = "accidentalFilledReversedFlatArrowUp"
    ACCIDENTAL_FIVE_QUARTER_TONES_FLAT_ARROW_DOWN = "accidentalFiveQuarterTonesFlatArrowDown"
    ACCIDENTAL_FIVE_QUARTER_TONES_SHARP_ARROW_UP = "accidentalFiveQuarterTonesSharpArrowUp"
    ACCIDENTAL_FLAT = "accidentalFlat"
    ACCIDENTAL_FLAT_ARABIC = "accidentalFlatArabic"
    ACCIDENTAL_FLAT_EQUAL_TEMPERED = "accidentalFlatEqualTempered"
    ACCIDENTAL_FLAT_LOWERED_STOCKHAUSEN = "accidentalFlatLoweredStockhausen"
    ACCIDENTAL_FLAT_ONE_ARROW_DOWN = "accidentalFlatOneArrowDown"
    ACCIDENTAL_FLAT_ONE_ARROW_UP = "accidentalFlatOneArrowUp"
    ACCIDENTAL_FLAT_RAISED_STOCKHAUSEN = "accidentalFlatRaisedStockhausen"
    ACCIDENTAL_FLAT_REPEATED_LINE_STOCKHAUSEN = "accidentalFlatRepeatedLineStockhausen"
    ACCIDENTAL_FLAT_REPEATED_SPACE_STOCKHAUSEN = "accidentalFlatRepeatedSpaceStockhausen"
    ACCIDENTAL_FLAT_SMALL = "accidentalFlatSmall"
    ACCIDENTAL_FLAT_THREE_ARROWS_DOWN = "accidentalFlatThreeArrowsDown"
    ACCIDENTAL_FLAT_THREE_ARROWS_UP = "accidentalFlatThreeArrowsUp"
    ACCIDENTAL_FLAT_TURNED = "accidentalFlatTurned"
    ACCIDENTAL_FLAT_TWO_ARROWS_DOWN = "accidentalFlatTwoArrowsDown"
    ACCIDENTAL_FLAT_TWO_ARROWS_UP = "accidentalFlatTwoArrowsUp"
    ACCIDENTAL_HABA_FLAT_QUARTER_TONE_HIGHER = "accidentalHabaFlatQuarterToneHigher"
    ACCIDENTAL_HABA_FLAT_THREE_QUARTER_TONES_LOWER = "accidentalHabaFlatThreeQuarterTonesLower"
    ACCIDENTAL_HABA_QUARTER_TONE_HIGHER = "accidentalHabaQuarterToneHigher"
    ACCIDENTAL_HABA_QUARTER_TONE_LOWER = "accidentalHabaQuarterToneLower"
    ACCIDENTAL_HABA_SHARP_QUARTER_TONE_LOWER = "accidentalHabaSharpQuarterToneLower"
    ACCIDENTAL_HABA_SHARP_THREE_QUARTER_TONES_HIGHER = "accidentalHabaSharpThreeQuarterTonesHigher"
    ACCIDENTAL_HALF_SHARP_ARROW_DOWN = "accidentalHalfSharpArrowDown"
    ACCIDENTAL_HALF_SHARP_ARROW_UP = "accidentalHalfSharpArrowUp"
    ACCIDENTAL_JOHNSTON13 = "accidentalJohnston13"
    ACCIDENTAL_JOHNSTON31 = "accidentalJohnston31"
    ACCIDENTAL_JOHNSTON_DOWN = "accidentalJohnstonDown"
    ACCIDENTAL_JOHNSTON_EL = "accidentalJohnstonEl"
    ACCIDENTAL_JOHNSTON_MINUS = "accidentalJohnstonMinus"
    ACCIDENTAL_JOHNSTON_PLUS = "accidentalJohnstonPlus"
    ACCIDENTAL_JOHNSTON_SEVEN = "accidentalJohnstonSeven"
    ACCIDENTAL_JOHNSTON_UP = "accidentalJohnstonUp"
    ACCIDENTAL_KOMA_FLAT = "accidentalKomaFlat"
    ACCIDENTAL_KOMA_SHARP = "accidentalKomaSharp"
    ACCIDENTAL_KORON = "accidentalKoron"
    ACCIDENTAL_KUCUK_MUCENNEB_FLAT = "accidentalKucukMucennebFlat"
    ACCIDENTAL_KUCUK_MUCENNEB_SHARP = "accidentalKucukMucennebSharp"
    ACCIDENTAL_LARGE_DOUBLE_SHARP = "accidentalLargeDoubleSharp"
    ACCIDENTAL_LOWER_ONE_SEPTIMAL_COMMA = "accidentalLowerOneSeptimalComma"
    ACCIDENTAL_LOWER_ONE_TRIDECIMAL_QUARTERTONE = "accidentalLowerOneTridecimalQuartertone"
    ACCIDENTAL_LOWER_ONE_UNDECIMAL_QUARTERTONE = "accidentalLowerOneUndecimalQuartertone"
    ACCIDENTAL_LOWER_TWO_SEPTIMAL_COMMAS = "accidentalLowerTwoSeptimalCommas"
    ACCIDENTAL_LOWERED_STOCKHAUSEN = "accidentalLoweredStockhausen"
    ACCIDENTAL_NARROW_REVERSED_FLAT = "accidentalNarrowReversedFlat"
    ACCIDENTAL_NARROW_REVERSED_FLAT_AND_FLAT = "accidentalNarrowReversedFlatAndFlat"
    ACCIDENTAL_NATURAL = "accidentalNatural"
    ACCIDENTAL_NATURAL_ARABIC = "accidentalNaturalArabic"
    ACCIDENTAL_NATURAL_EQUAL_TEMPERED = "accidentalNaturalEqualTempered"
    ACCIDENTAL_NATURAL_FLAT = "accidentalNaturalFlat"
    ACCIDENTAL_NATURAL_LOWERED_STOCKHAUSEN = "accidentalNaturalLoweredStockhausen"
    ACCIDENTAL_NATURAL_ONE_ARROW_DOWN = "accidentalNaturalOneArrowDown"
    ACCIDENTAL_NATURAL_ONE_ARROW_UP = "accidentalNaturalOneArrowUp"
    ACCIDENTAL_NATURAL_RAISED_STOCKHAUSEN = "accidentalNaturalRaisedStockhausen"
    ACCIDENTAL_NATURAL_REVERSED = "accidentalNaturalReversed"
    ACCIDENTAL_NATURAL_SHARP = "accidentalNaturalSharp"
    ACCIDENTAL_NATURAL_SMALL = "accidentalNaturalSmall"
    ACCIDENTAL_NATURAL_THREE_ARROWS_DOWN = "accidentalNaturalThreeArrowsDown"
    ACCIDENTAL_NATURAL_THREE_ARROWS_UP = "accidentalNaturalThreeArrowsUp"
    ACCIDENTAL_NATURAL_TWO_ARROWS_DOWN = "accidentalNaturalTwoArrowsDown"
    ACCIDENTAL_NATURAL_TWO_ARROWS_UP = "accidentalNaturalTwoArrowsUp"
    ACCIDENTAL_ONE_AND_AHALF_SHARPS_ARROW_DOWN = "accidentalOneAndAHalfSharpsArrowDown"
    ACCIDENTAL_ONE_AND_AHALF_SHARPS_ARROW_UP = "accidentalOneAndAHalfSharpsArrowUp"
    ACCIDENTAL_ONE_QUARTER_TONE_FLAT_FERNEYHOUGH = "accidentalOneQuarterToneFlatFerneyhough"
    ACCIDENTAL_ONE_QUARTER_TONE_SHARP_FERNEYHOUGH = "accidentalOneQuarterToneSharpFerneyhough"
    ACCIDENTAL_ONE_THIRD_TONE_FLAT_FERNEYHOUGH = "accidentalOneThirdToneFlatFerneyhough"
    ACCIDENTAL_ONE_THIRD_TONE_SHARP_FERNEYHOUGH = "accidentalOneThirdToneSharpFerneyhough"
    ACCIDENTAL_PARENS_LEFT = "accidentalParensLeft"
    ACCIDENTAL_PARENS_RIGHT = "accidentalParensRight"
    ACCIDENTAL_QUARTER_FLAT_EQUAL_TEMPERED = "accidentalQuarterFlatEqualTempered"
    ACCIDENTAL_QUARTER_SHARP_EQUAL_TEMPERED = "accidentalQuarterSharpEqualTempered"
    ACCIDENTAL_QUARTER_TONE_FLAT_ARABIC = "accidentalQuarterToneFlatArabic"
    ACCIDENTAL_QUARTER_TONE_FLAT_ARROW_UP = "accidentalQuarterToneFlatArrowUp"
    ACCIDENTAL_QUARTER_TONE_FLAT_NATURAL_ARROW_DOWN = "accidentalQuarterToneFlatNaturalArrowDown"
    ACCIDENTAL_QUARTER_TONE_FLAT_PENDERECKI = "accidentalQuarterToneFlatPenderecki"
    ACCIDENTAL_QUARTER_TONE_FLAT_STEIN = "accidentalQuarterToneFlatStein"
    ACCIDENTAL_QUARTER_TONE_FLAT_VAN_BLANKENBURG = "accidentalQuarterToneFlatVanBlankenburg"
    ACCIDENTAL_QUARTER_TONE_SHARP_ARABIC = "accidentalQuarterToneSharpArabic"
    ACCIDENTAL_QUARTER_TONE_SHARP_ARROW_DOWN = "accidentalQuarterToneSharpArrowDown"
    ACCIDENTAL_QUARTER_TONE_SHARP_BUSOTTI = "accidentalQuarterToneSharpBusotti"
    ACCIDENTAL_QUARTER_TONE_SHARP_NATURAL_ARROW_UP = "accidentalQuarterToneSharpNaturalArrowUp"
    ACCIDENTAL_QUARTER_TONE_SHARP_STEIN = "accidentalQuarterToneSharpStein"
    ACCIDENTAL_QUARTER_TONE_SHARP_WIGGLE = "accidentalQuarterToneSharpWiggle"
    ACCIDENTAL_RAISE_ONE_SEPTIMAL_COMMA = "accidentalRaiseOneSeptimalComma"
    ACCIDENTAL_RAISE_ONE_TRIDECIMAL_QUARTERTONE = "accidentalRaiseOneTridecimalQuartertone"
    ACCIDENTAL_RAISE_ONE_UNDECIMAL_QUARTERTONE = "accidentalRaiseOneUndecimalQuartertone"
    ACCIDENTAL_RAISE_TWO_SEPTIMAL_COMMAS = "accidentalRaiseTwoSeptimalCommas"
    ACCIDENTAL_RAISED_STOCKHAUSEN = "accidentalRaisedStockhausen"
    ACCIDENTAL_REVERSED_FLAT_AND_FLAT_ARROW_DOWN = "accidentalReversedFlatAndFlatArrowDown"
    ACCIDENTAL_REVERSED_FLAT_AND_FLAT_ARROW_UP = "accidentalReversedFlatAndFlatArrowUp"
    ACCIDENTAL_REVERSED_FLAT_ARROW_DOWN = "accidentalReversedFlatArrowDown"
    ACCIDENTAL_REVERSED_FLAT_ARROW_UP = "accidentalReversedFlatArrowUp"
    ACCIDENTAL_SHARP = "accidentalSharp"
    ACCIDENTAL_SHARP_ARABIC = "accidentalSharpArabic"
    ACCIDENTAL_SHARP_EQUAL_TEMPERED = "accidentalSharpEqualTempered"
    ACCIDENTAL_SHARP_LOWERED_STOCKHAUSEN = "accidentalSharpLoweredStockhausen"
    ACCIDENTAL_SHARP_ONE_ARROW_DOWN = "accidentalSharpOneArrowDown"
    ACCIDENTAL_SHARP_ONE_ARROW_UP = "accidentalSharpOneArrowUp"
    ACCIDENTAL_SHARP_ONE_HORIZONTAL_STROKE = "accidentalSharpOneHorizontalStroke"
    ACCIDENTAL_SHARP_RAISED_STOCKHAUSEN = "accidentalSharpRaisedStockhausen"
    ACCIDENTAL_SHARP_REPEATED_LINE_STOCKHAUSEN = "accidentalSharpRepeatedLineStockhausen"
    ACCIDENTAL_SHARP_REPEATED_SPACE_STOCKHAUSEN = "accidentalSharpRepeatedSpaceStockhausen"
    ACCIDENTAL_SHARP_REVERSED = "accidentalSharpReversed"
    ACCIDENTAL_SHARP_SHARP = "accidentalSharpSharp"
    ACCIDENTAL_SHARP_SMALL = "accidentalSharpSmall"
    ACCIDENTAL_SHARP_THREE_ARROWS_DOWN = "accidentalSharpThreeArrowsDown"
    ACCIDENTAL_SHARP_THREE_ARROWS_UP = "accidentalSharpThreeArrowsUp"
    ACCIDENTAL_SHARP_TWO_ARROWS_DOWN = "accidentalSharpTwoArrowsDown"
    ACCIDENTAL_SHARP_TWO_ARROWS_UP = "accidentalSharpTwoArrowsUp"
    ACCIDENTAL_SIMS12_DOWN = "accidentalSims12Down"
    ACCIDENTAL_SIMS12_UP = "accidentalSims12Up"
    ACCIDENTAL_SIMS4_DOWN = "accidentalSims4Down"
    ACCIDENTAL_SIMS4_UP = "accidentalSims4Up"
    ACCIDENTAL_SIMS6_DOWN = "accidentalSims6Down"
    ACCIDENTAL_SIMS6_UP = "accidentalSims6Up"
    ACCIDENTAL_SORI = "accidentalSori"
    ACCIDENTAL_TAVENER_FLAT = "accidentalTavenerFlat"
    ACCIDENTAL_TAVENER_SHARP = "accidentalTavenerSharp"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_ARABIC = "accidentalThreeQuarterTonesFlatArabic"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_ARROW_DOWN = "accidentalThreeQuarterTonesFlatArrowDown"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_ARROW_UP = "accidentalThreeQuarterTonesFlatArrowUp"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_COUPER = "accidentalThreeQuarterTonesFlatCouper"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_GRISEY = "accidentalThreeQuarterTonesFlatGrisey"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_TARTINI = "accidentalThreeQuarterTonesFlatTartini"
    ACCIDENTAL_THREE_QUARTER_TONES_FLAT_ZIMMERMANN = "accidentalThreeQuarterTonesFlatZimmermann"
    ACCIDENTAL_THREE_QUARTER_TONES_SHARP_ARABIC = "accidentalThreeQuarterTonesSharpArabic"
    ACCIDENTAL_THREE_QUARTER_TONES_SHARP_ARROW_DOWN = "accidentalThreeQuarterTonesSharpArrowDown"
    ACCIDENTAL_THREE_QUARTER_TONES_SHARP_ARROW_UP = "accidentalThreeQuarterTonesSharpArrowUp"
    ACCIDENTAL_THREE_QUARTER_TONES_SHARP_BUSOTTI = "accidentalThreeQuarterTonesSharpBusotti"
    ACCIDENTAL_THREE_QUARTER_TONES_SHARP_STEIN = "accidentalThreeQuarterTonesSharpStein"
    ACCIDENTAL_TRIPLE_FLAT = "accidentalTripleFlat"
    ACCIDENTAL_TRIPLE_SHARP = "accidentalTripleSharp"
    ACCIDENTAL_TWO_THIRD_TONES_FLAT_FERNEYHOUGH = "accidentalTwoThirdTonesFlatFerneyhough"
    ACCIDENTAL_TWO_THIRD_TONES_SHARP_FERNEYHOUGH = "accidentalTwoThirdTonesSharpFerneyhough"
    ACCIDENTAL_WILSON_MINUS = "accidentalWilsonMinus"
    ACCIDENTAL_WILSON_PLUS = "accidentalWilsonPlus"
    ACCIDENTAL_WYSCHNEGRADSKY10_TWELFTHS_FLAT = "accidentalWyschnegradsky10TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY10_TWELFTHS_SHARP = "accidentalWyschnegradsky10TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY11_TWELFTHS_FLAT = "accidentalWyschnegradsky11TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY11_TWELFTHS_SHARP = "accidentalWyschnegradsky11TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY1_TWELFTHS_FLAT = "accidentalWyschnegradsky1TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY1_TWELFTHS_SHARP = "accidentalWyschnegradsky1TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY2_TWELFTHS_FLAT = "accidentalWyschnegradsky2TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY2_TWELFTHS_SHARP = "accidentalWyschnegradsky2TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY3_TWELFTHS_FLAT = "accidentalWyschnegradsky3TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY3_TWELFTHS_SHARP = "accidentalWyschnegradsky3TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY4_TWELFTHS_FLAT = "accidentalWyschnegradsky4TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY4_TWELFTHS_SHARP = "accidentalWyschnegradsky4TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY5_TWELFTHS_FLAT = "accidentalWyschnegradsky5TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY5_TWELFTHS_SHARP = "accidentalWyschnegradsky5TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY6_TWELFTHS_FLAT = "accidentalWyschnegradsky6TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY6_TWELFTHS_SHARP = "accidentalWyschnegradsky6TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY7_TWELFTHS_FLAT = "accidentalWyschnegradsky7TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY7_TWELFTHS_SHARP = "accidentalWyschnegradsky7TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY8_TWELFTHS_FLAT = "accidentalWyschnegradsky8TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY8_TWELFTHS_SHARP = "accidentalWyschnegradsky8TwelfthsSharp"
    ACCIDENTAL_WYSCHNEGRADSKY9_TWELFTHS_FLAT = "accidentalWyschnegradsky9TwelfthsFlat"
    ACCIDENTAL_WYSCHNEGRADSKY9_TWELFTHS_SHARP = "accidentalWyschnegradsky9TwelfthsSharp"
    ACCIDENTAL_XENAKIS_ONE_THIRD_TONE_SHARP = "accidentalXenakisOneThirdToneSharp"
    ACCIDENTAL_XENAKIS_TWO_THIRD_TONES_SHARP = "accidentalXenakisTwoThirdTonesSharp"
    ANALYTICS_CHORALMELODIE = "analyticsChoralmelodie"
    ANALYTICS_END_STIMME = "analyticsEndStimme"
    ANALYTICS_HAUPTRHYTHMUS = "analyticsHauptrhythmus"
    ANALYTICS_HAUPTSTIMME = "analyticsHauptstimme"
    ANALYTICS_INVERSION1 = "analyticsInversion1"
    ANALYTICS_NEBENSTIMME = "analyticsNebenstimme"
    ANALYTICS_START_STIMME = "analyticsStartStimme"
    ANALYTICS_THEME = "analyticsTheme"
    ANALYTICS_THEME1 = "analyticsTheme1"
    ANALYTICS_THEME_INVERSION = "analyticsThemeInversion"
    ANALYTICS_THEME_RETROGRADE = "analyticsThemeRetrograde"
    ANALYTICS_THEME_RETROGRADE_INVERSION = "analyticsThemeRetrogradeInversion"
    ARPEGGIATO = "arpeggiato"
    ARPEGGIATO_DOWN = "arpeggiatoDown"
    ARPEGGIATO_UP = "arpeggiatoUp"
    ARROW_BLACK_DOWN = "arrowBlackDown"
    ARROW_BLACK_DOWN_LEFT = "arrowBlackDownLeft"
    ARROW_BLACK_DOWN_RIGHT = "arrowBlackDownRight"
    ARROW_BLACK_LEFT = "arrowBlackLeft"
    ARROW_BLACK_RIGHT = "arrowBlackRight"
    ARROW_BLACK_UP = "arrowBlackUp"
    ARROW_BLACK_UP_LEFT = "arrowBlackUpLeft"
    ARROW_BLACK_UP_RIGHT = "arrowBlackUpRight"
    ARROW_OPEN_DOWN = "arrowOpenDown"
    ARROW_OPEN_DOWN_LEFT = "arrowOpenDownLeft"
    ARROW_OPEN_DOWN_RIGHT = "arrowOpenDownRight"
    ARROW_OPEN_LEFT = "arrowOpenLeft"
    ARROW_OPEN_RIGHT = "arrowOpenRight"
    ARROW_OPEN_UP = "arrowOpenUp"
    ARROW_OPEN_UP_LEFT = "arrowOpenUpLeft"
    ARROW_OPEN_UP_RIGHT = "arrowOpenUpRight"
    ARROW_WHITE_DOWN = "arrowWhiteDown"
    ARROW_WHITE_DOWN_LEFT = "arrowWhiteDownLeft"
    ARROW_WHITE_DOWN_RIGHT = "arrowWhiteDownRight"
    ARROW_WHITE_LEFT = "arrowWhiteLeft"
    ARROW_WHITE_RIGHT = "arrowWhiteRight"
    ARROW_WHITE_UP = "arrowWhiteUp"
    ARROW_WHITE_UP_LEFT = "arrowWhiteUpLeft"
    ARROW_WHITE_UP_RIGHT = "arrowWhiteUpRight"
    ARROWHEAD_BLACK_DOWN = "arrowheadBlackDown"
    ARROWHEAD_BLACK_DOWN_LEFT = "arrowheadBlackDownLeft"
    ARROWHEAD_BLACK_DOWN_RIGHT = "arrowheadBlackDownRight"
    ARROWHEAD_BLACK_LEFT = "arrowheadBlackLeft"
    ARROWHEAD_BLACK_RIGHT = "arrowheadBlackRight"
    ARROWHEAD_BLACK_UP = "arrowheadBlackUp"
    ARROWHEAD_BLACK_UP_LEFT = "arrowheadBlackUpLeft"
    ARROWHEAD_BLACK_UP_RIGHT = "arrowheadBlackUpRight"
    ARROWHEAD_OPEN_DOWN = "arrowheadOpenDown"
    ARROWHEAD_OPEN_DOWN_LEFT = "arrowheadOpenDownLeft"
    ARROWHEAD_OPEN_DOWN_RIGHT = "arrowheadOpenDownRight"
    ARROWHEAD_OPEN_LEFT = "arrowheadOpenLeft"
    ARROWHEAD_OPEN_RIGHT = "arrowheadOpenRight"
    ARROWHEAD_OPEN_UP = "arrowheadOpenUp"
    ARROWHEAD_OPEN_UP_LEFT = "arrowheadOpenUpLeft"
    ARROWHEAD_OPEN_UP_RIGHT = "arrowheadOpenUpRight"
    ARROWHEAD_WHITE_DOWN = "arrowheadWhiteDown"
    ARROWHEAD_WHITE_DOWN_LEFT = "arrowheadWhiteDownLeft"
    ARROWHEAD_WHITE_DOWN_RIGHT = "arrowheadWhiteDownRight"
    ARROWHEAD_WHITE_LEFT = "arrowheadWhiteLeft"
    ARROWHEAD_WHITE_RIGHT = "arrowheadWhiteRight"
    ARROWHEAD_WHITE_UP = "arrowheadWhiteUp"
    ARROWHEAD_WHITE_UP_LEFT = "arrowheadWhiteUpLeft"
    ARROWHEAD_WHITE_UP_RIGHT = "arrowheadWhiteUpRight"
    ARTIC_ACCENT_ABOVE = "articAccentAbove"
    ARTIC_ACCENT_BELOW = "articAccentBelow"
    ARTIC_ACCENT_STACCATO_ABOVE = "articAccentStaccatoAbove"
    ARTIC_ACCENT_STACCATO_BELOW = "articAccentStaccatoBelow"
    ARTIC_LAISSEZ_VIBRER_ABOVE = "articLaissezVibrerAbove"
    ARTIC_LAISSEZ_VIBRER_BELOW = "articLaissezVibrerBelow"
    ARTIC_MARCATO_ABOVE = "articMarcatoAbove"
    ARTIC_MARCATO_BELOW = "articMarcatoBelow"
    ARTIC_MARCATO_STACCATO_ABOVE = "articMarcatoStaccatoAbove"
    ARTIC_MARCATO_STACCATO_BELOW = "articMarcatoStaccatoBelow"
    ARTIC_MARCATO_TENUTO_ABOVE = "articMarcatoTenutoAbove"
    ARTIC_MARCATO_TENUTO_BELOW = "articMarcatoTenutoBelow"
    ARTIC_SOFT_ACCENT_ABOVE = "articSoftAccentAbove"
    ARTIC_SOFT_ACCENT_BELOW = "articSoftAccentBelow"
    ARTIC_SOFT_ACCENT_STACCATO_ABOVE = "articSoftAccentStaccatoAbove"
    ARTIC_SOFT_ACCENT_STACCATO_BELOW = "articSoftAccentStaccatoBelow"
    ARTIC_SOFT_ACCENT_TENUTO_ABOVE = "articSoftAccentTenutoAbove"
    ARTIC_SOFT_ACCENT_TENUTO_BELOW = "articSoftAccentTenutoBelow"
    ARTIC_SOFT_ACCENT_TENUTO_STACCATO_ABOVE = "articSoftAccentTenutoStaccatoAbove"
    ARTIC_SOFT_ACCENT_TENUTO_STACCATO_BELOW = "articSoftAccentTenutoStaccatoBelow"
    ARTIC_STACCATISSIMO_ABOVE = "articStaccatissimoAbove"
    ARTIC_STACCATISSIMO_BELOW = "articStaccatissimoBelow"
    ARTIC_STACCATISSIMO_STROKE_ABOVE = "articStaccatissimoStrokeAbove"
    ARTIC_STACCATISSIMO_STROKE_BELOW = "articStaccatissimoStrokeBelow"
    ARTIC_STACCATISSIMO_WEDGE_ABOVE = "articStaccatissimoWedgeAbove"
    ARTIC_STACCATISSIMO_WEDGE_BELOW = "articStaccatissimoWedgeBelow"
    ARTIC_STACCATO_ABOVE = "articStaccatoAbove"
    ARTIC_STACCATO_BELOW = "articStaccatoBelow"
    ARTIC_STRESS_ABOVE = "articStressAbove"
    ARTIC_STRESS_BELOW = "articStressBelow"
    ARTIC_TENUTO_ABOVE = "articTenutoAbove"
    ARTIC_TENUTO_ACCENT_ABOVE = "articTenutoAccentAbove"
    ARTIC_TENUTO_ACCENT_BELOW = "articTenutoAccentBelow"
    ARTIC_TENUTO_BELOW = "articTenutoBelow"
    ARTIC_TENUTO_STACCATO_ABOVE = "articTenutoStaccatoAbove"
    ARTIC_TENUTO_STACCATO_BELOW = "articTenutoStaccatoBelow"
    ARTIC_UNSTRESS_ABOVE = "articUnstressAbove"
    ARTIC_UNSTRESS_BELOW = "articUnstressBelow"
    AUGMENTATION_DOT = "augmentationDot"
    BARLINE_DASHED = "barlineDashed"
    BARLINE_DOTTED = "barlineDotted"
    BARLINE_DOUBLE = "barlineDouble"
    BARLINE_FINAL = "barlineFinal"
    BARLINE_HEAVY = "barlineHeavy"
    BARLINE_HEAVY_HEAVY = "barlineHeavyHeavy"
    BARLINE_REVERSE_FINAL = "barlineReverseFinal"
    BARLINE_SHORT = "barlineShort"
    BARLINE_SINGLE = "barlineSingle"
    BARLINE_TICK = "barlineTick"
    BEAM_ACCEL_RIT1 = "beamAccelRit1"
    BEAM_ACCEL_RIT10 = "beamAccelRit10"
    BEAM_ACCEL_RIT11 = "beamAccelRit11"
    BEAM_ACCEL_RIT12 = "beamAccelRit12"
    BEAM_ACCEL_RIT13 = "beamAccelRit13"
    BEAM_ACCEL_RIT14 = "beamAccelRit14"
    BEAM_ACCEL_RIT15 = "beamAccelRit15"
    BEAM_ACCEL_RIT2 = "beamAccelRit2"
    BEAM_ACCEL_RIT3 = "beamAccelRit3"
    BEAM_ACCEL_RIT4 = "beamAccelRit4"
    BEAM_ACCEL_RIT5 = "beamAccelRit5"
    BEAM_ACCEL_RIT6 = "beamAccelRit6"
    BEAM_ACCEL_RIT7 = "beamAccelRit7"
    BEAM_ACCEL_RIT8 = "beamAccelRit8"
    BEAM_ACCEL_RIT9 = "beamAccelRit9"
    BEAM_ACCEL_RIT_FINAL = "beamAccelRitFinal"
    BRACE = "brace"
    BRACKET = "bracket"
    BRACKET_BOTTOM = "bracketBottom"
    BRACKET_TOP = "bracketTop"
    BRASS_BEND = "brassBend"
    BRASS_DOIT_LONG = "brassDoitLong"
    BRASS_DOIT_MEDIUM = "brassDoitMedium"
    BRASS_DOIT_SHORT = "brassDoitShort"
    BRASS_FALL_LIP_LONG = "brassFallLipLong"
    BRASS_FALL_LIP_MEDIUM = "brassFallLipMedium"
    BRASS_FALL_LIP_SHORT = "brassFallLipShort"
    BRASS_FALL_ROUGH_LONG = "brassFallRoughLong"
    BRASS_FALL_ROUGH_MEDIUM = "brassFallRoughMedium"
    BRASS_FALL_ROUGH_SHORT = "brassFallRoughShort"
    BRASS_FALL_SMOOTH_LONG = "brassFallSmoothLong"
    BRASS_FALL_SMOOTH_MEDIUM = "brassFallSmoothMedium"
    BRASS_FALL_SMOOTH_SHORT = "brassFallSmoothShort"
    BRASS_FLIP = "brassFlip"
    BRASS_HARMON_MUTE_CLOSED = "brassHarmonMuteClosed"
    BRASS_HARMON_MUTE_STEM_HALF_LEFT = "brassHarmonMuteStemHalfLeft"
    BRASS_HARMON_MUTE_STEM_HALF_RIGHT = "brassHarmonMuteStemHalfRight"
    BRASS_HARMON_MUTE_STEM_OPEN = "brassHarmonMuteStemOpen"
    BRASS_JAZZ_TURN = "brassJazzTurn"
    BRASS_LIFT_LONG = "brassLiftLong"
    BRASS_LIFT_MEDIUM = "brassLiftMedium"
    BRASS_LIFT_SHORT = "brassLiftShort"
    BRASS_LIFT_SMOOTH_LONG = "brassLiftSmoothLong"
    BRASS_LIFT_SMOOTH_MEDIUM = "brassLiftSmoothMedium"
    BRASS_LIFT_SMOOTH_SHORT = "brassLiftSmoothShort"
    BRASS_MUTE_CLOSED = "brassMuteClosed"
    BRASS_MUTE_HALF_CLOSED = "brassMuteHalfClosed"
    BRASS_MUTE_OPEN = "brassMuteOpen"
    BRASS_PLOP = "brassPlop"
    BRASS_SCOOP = "brassScoop"
    BRASS_SMEAR = "brassSmear"
    BRASS_VALVE_TRILL = "brassValveTrill"
    BREATH_MARK_COMMA = "breathMarkComma"
    BREATH_MARK_SALZEDO = "breathMarkSalzedo"
    BREATH_MARK_TICK = "breathMarkTick"
    BREATH_MARK_UPBOW = "breathMarkUpbow"
    BRIDGE_CLEF = "bridgeClef"
    BUZZ_ROLL = "buzzRoll"
    C_CLEF = "cClef"
    C_CLEF8VB = "cClef8vb"
    C_CLEF_ARROW_DOWN = "cClefArrowDown"
    C_CLEF_ARROW_UP = "cClefArrowUp"
    C_CLEF_CHANGE = "cClefChange"
    C_CLEF_COMBINING = "cClefCombining"
    C_CLEF_FRENCH = "cClefFrench"
    C_CLEF_FRENCH20_C = "cClefFrench20C"
    C_CLEF_REVERSED = "cClefReversed"
    C_CLEF_SQUARE = "cClefSquare"
    C_CLEF_TRIANGULAR = "cClefTriangular"
    C_CLEF_TRIANGULAR_TO_FCLEF = "cClefTriangularToFClef"
    C_CLEF_TURNED = "cClefTurned"
    CAESURA = "caesura"
    CAESURA_CURVED = "caesuraCurved"
    CAESURA_SHORT = "caesuraShort"
    CAESURA_SINGLE_STROKE = "caesuraSingleStroke"
    CAESURA_THICK = "caesuraThick"
    CHANT_ACCENTUS_ABOVE = "chantAccentusAbove"
    CHANT_ACCENTUS_BELOW = "chantAccentusBelow"
    CHANT_AUCTUM_ASC = "chantAuctumAsc"
    CHANT_AUCTUM_DESC = "chantAuctumDesc"
    CHANT_AUGMENTUM = "chantAugmentum"
    CHANT_CAESURA = "chantCaesura"
    CHANT_CCLEF = "chantCclef"
    CHANT_CIRCULUS_ABOVE = "chantCirculusAbove"
    CHANT_CIRCULUS_BELOW = "chantCirculusBelow"
    CHANT_CONNECTING_LINE_ASC2ND = "chantConnectingLineAsc2nd"
    CHANT_CONNECTING_LINE_ASC3RD = "chantConnectingLineAsc3rd"
    CHANT_CONNECTING_LINE_ASC4TH = "chantConnectingLineAsc4th"
    CHANT_CONNECTING_LINE_ASC5TH = "chantConnectingLineAsc5th"
    CHANT_CONNECTING_LINE_ASC6TH = "chantConnectingLineAsc6th"
    CHANT_CUSTOS_STEM_DOWN_POS_HIGH = "chantCustosStemDownPosHigh"
    CHANT_CUSTOS_STEM_DOWN_POS_HIGHEST = "chantCustosStemDownPosHighest"
    CHANT_CUSTOS_STEM_DOWN_POS_LOW = "chantCustosStemDownPosLow"
    CHANT_CUSTOS_STEM_DOWN_POS_LOWEST = "chantCustosStemDownPosLowest"
    CHANT_CUSTOS_STEM_DOWN_POS_MIDDLE = "chantCustosStemDownPosMiddle"
    CHANT_CUSTOS_STEM_UP_POS_HIGH = "chantCustosStemUpPosHigh"
    CHANT_CUSTOS_STEM_UP_POS_HIGHEST = "chantCustosStemUpPosHighest"
    CHANT_CUSTOS_STEM_UP_POS_LOW = "chantCustosStemUpPosLow"
    CHANT_CUSTOS_STEM_UP_POS_LOWEST = "chantCustosStemUpPosLowest"
    CHANT_CUSTOS_STEM_UP_POS_MIDDLE = "chantCustosStemUpPosMiddle"
    CHANT_DEMINUTUM_LOWER = "chantDeminutumLower"
    CHANT_DEMINUTUM_UPPER = "chantDeminutumUpper"
    CHANT_DIVISIO_FINALIS = "chantDivisioFinalis"
    CHANT_DIVISIO_MAIOR = "chantDivisioMaior"
    CHANT_DIVISIO_MAXIMA = "chantDivisioMaxima"
    CHANT_DIVISIO_MINIMA = "chantDivisioMinima"
    CHANT_ENTRY_LINE_ASC2ND = "chantEntryLineAsc2nd"
    CHANT_ENTRY_LINE_ASC3RD = "chantEntryLineAsc3rd"
    CHANT_ENTRY_LINE_ASC4TH = "chantEntryLineAsc4th"
    CHANT_ENTRY_LINE_ASC5TH = "chantEntryLineAsc5th"
    CHANT_ENTRY_LINE_ASC6TH = "chantEntryLineAsc6th"
    CHANT_EPISEMA = "chantEpisema"
    CHANT_FCLEF = "chantFclef"
    CHANT_ICTUS_ABOVE = "chantIctusAbove"
    CHANT_ICTUS_BELOW = "chantIctusBelow"
    CHANT_LIGATURA_DESC2ND = "chantLigaturaDesc2nd"
    CHANT_LIGATURA_DESC3RD = "chantLigaturaDesc3rd"
    CHANT_LIGATURA_DESC4TH = "chantLigaturaDesc4th"
    CHANT_LIGATURA_DESC5TH = "chantLigaturaDesc5th"
    CHANT_ORISCUS_ASCENDING = "chantOriscusAscending"
    CHANT_ORISCUS_DESCENDING = "chantOriscusDescending"
    CHANT_ORISCUS_LIQUESCENS = "chantOriscusLiquescens"
    CHANT_PODUS_LOWER = "chantPodusLower"
    CHANT_PODUS_UPPER = "chantPodusUpper"
    CHANT_PUNCTUM = "chantPunctum"
    CHANT_PUNCTUM_CAVUM = "chantPunctumCavum"
    CHANT_PUNCTUM_DEMINUTUM = "chantPunctumDeminutum"
    CHANT_PUNCTUM_INCLINATUM = "chantPunctumInclinatum"
    CHANT_PUNCTUM_INCLINATUM_AUCTUM = "chantPunctumInclinatumAuctum"
    CHANT_PUNCTUM_INCLINATUM_DEMINUTUM = "chantPunctumInclinatumDeminutum"
    CHANT_PUNCTUM_LINEA = "chantPunctumLinea"
    CHANT_PUNCTUM_LINEA_CAVUM = "chantPunctumLineaCavum"
    CHANT_PUNCTUM_VIRGA = "chantPunctumVirga"
    CHANT_PUNCTUM_VIRGA_REVERSED = "chantPunctumVirgaReversed"
    CHANT_QUILISMA = "chantQuilisma"
    CHANT_SEMICIRCULUS_ABOVE = "chantSemicirculusAbove"
    CHANT_SEMICIRCULUS_BELOW = "chantSemicirculusBelow"
    CHANT_STAFF = "chantStaff"
    CHANT_STAFF_NARROW = "chantStaffNarrow"
    CHANT_STAFF_WIDE = "chantStaffWide"
    CHANT_STROPHICUS = "chantStrophicus"
    CHANT_STROPHICUS_AUCTUS = "chantStrophicusAuctus"
    CHANT_STROPHICUS_LIQUESCENS2ND = "chantStrophicusLiquescens2nd"
    CHANT_STROPHICUS_LIQUESCENS3RD = "chantStrophicusLiquescens3rd"
    CHANT_STROPHICUS_LIQUESCENS4TH = "chantStrophicusLiquescens4th"
    CHANT_STROPHICUS_LIQUESCENS5TH = "chantStrophicusLiquescens5th"
    CHANT_VIRGULA = "chantVirgula"
    CLEF15 = "clef15"
    CLEF8 = "clef8"
    CLEF_CHANGE_COMBINING = "clefChangeCombining"
    CODA = "coda"
    CODA_SQUARE = "codaSquare"
    CONDUCTOR_BEAT2_COMPOUND = "conductorBeat2Compound"
    CONDUCTOR_BEAT2_SIMPLE = "conductorBeat2Simple"
    CONDUCTOR_BEAT3_COMPOUND = "conductorBeat3Compound"
    CONDUCTOR_BEAT3_SIMPLE = "conductorBeat3Simple"
    CONDUCTOR_BEAT4_COMPOUND = "conductorBeat4Compound"
    CONDUCTOR_BEAT4_SIMPLE = "conductorBeat4Simple"
    CONDUCTOR_LEFT_BEAT = "conductorLeftBeat"
    CONDUCTOR_RIGHT_BEAT = "conductorRightBeat"
    CONDUCTOR_STRONG_BEAT = "conductorStrongBeat"
    CONDUCTOR_UNCONDUCTED = "conductorUnconducted"
    CONDUCTOR_WEAK_BEAT = "conductorWeakBeat"
    CONTROL_BEGIN_BEAM = "controlBeginBeam"
    CONTROL_BEGIN_PHRASE = "controlBeginPhrase"
    CONTROL_BEGIN_SLUR = "controlBeginSlur"
    CONTROL_BEGIN_TIE = "controlBeginTie"
    CONTROL_END_BEAM = "controlEndBeam"
    CONTROL_END_PHRASE = "controlEndPhrase"
    CONTROL_END_SLUR = "controlEndSlur"
    CONTROL_END_TIE = "controlEndTie"
    CSYM_ACCIDENTAL_DOUBLE_FLAT = "csymAccidentalDoubleFlat"
    CSYM_ACCIDENTAL_DOUBLE_SHARP = "csymAccidentalDoubleSharp"
    CSYM_ACCIDENTAL_FLAT = "csymAccidentalFlat"
    CSYM_ACCIDENTAL_NATURAL = "csymAccidentalNatural"
    CSYM_ACCIDENTAL_SHARP = "csymAccidentalSharp"
    CSYM_ACCIDENTAL_TRIPLE_FLAT = "csymAccidentalTripleFlat"
    CSYM_ACCIDENTAL_TRIPLE_SHARP = "csymAccidentalTripleSharp"
    CSYM_ALTERED_BASS_SLASH = "csymAlteredBassSlash"
    CSYM_AUGMENTED = "csymAugmented"
    CSYM_BRACKET_LEFT_TALL = "csymBracketLeftTall"
    CSYM_BRACKET_RIGHT_TALL = "csymBracketRightTall"
    CSYM_DIAGONAL_ARRANGEMENT_SLASH = "csymDiagonalArrangementSlash"
    CSYM_DIMINISHED = "csymDiminished"
    CSYM_HALF_DIMINISHED = "csymHalfDiminished"
    CSYM_MAJOR_SEVENTH = "csymMajorSeventh"
    CSYM_MINOR = "csymMinor"
    CSYM_PARENS_LEFT_TALL = "csymParensLeftTall"
    CSYM_PARENS_LEFT_VERY_TALL = "csymParensLeftVeryTall"
    CSYM_PARENS_RIGHT_TALL = "csymParensRightTall"
    CSYM_PARENS_RIGHT_VERY_TALL = "csymParensRightVeryTall"
    CURLEW_SIGN = "curlewSign"
    DA_CAPO = "daCapo"
    DAL_SEGNO = "dalSegno"
    DYNAMIC_COMBINED_SEPARATOR_COLON = "dynamicCombinedSeparatorColon"
    DYNAMIC_COMBINED_SEPARATOR_HYPHEN = "dynamicCombinedSeparatorHyphen"
    DYNAMIC_COMBINED_SEPARATOR_SLASH = "dynamicCombinedSeparatorSlash"
    DYNAMIC_COMBINED_SEPARATOR_SPACE = "dynamicCombinedSeparatorSpace"
    DYNAMIC_CRESCENDO_HAIRPIN = "dynamicCrescendoHairpin"
    DYNAMIC_DIMINUENDO_HAIRPIN = "dynamicDiminuendoHairpin"
    DYNAMIC_FF = "dynamicFF"
    DYNAMIC_FFF = "dynamicFFF"
    DYNAMIC_FFFF = "dynamicFFFF"
    DYNAMIC_FFFFF = "dynamicFFFFF"
    DYNAMIC_FFFFFF = "dynamicFFFFFF"
    DYNAMIC_FORTE = "dynamicForte"
    DYNAMIC_FORTE_PIANO = "dynamicFortePiano"
    DYNAMIC_FORZANDO = "dynamicForzando"
    DYNAMIC_HAIRPIN_BRACKET_LEFT = "dynamicHairpinBracketLeft"
    DYNAMIC_HAIRPIN_BRACKET_RIGHT = "dynamicHairpinBracketRight"
    DYNAMIC_HAIRPIN_PARENTHESIS_LEFT = "dynamicHairpinParenthesisLeft"
    DYNAMIC_HAIRPIN_PARENTHESIS_RIGHT = "dynamicHairpinParenthesisRight"
    DYNAMIC_MF = "dynamicMF"
    DYNAMIC_MP = "dynamicMP"
    DYNAMIC_MESSA_DI_VOCE = "dynamicMessaDiVoce"
    DYNAMIC_MEZZO = "dynamicMezzo"
    DYNAMIC_NIENTE = "dynamicNiente"
    DYNAMIC_NIENTE_FOR_HAIRPIN = "dynamicNienteForHairpin"
    DYNAMIC_PF = "dynamicPF"
    DYNAMIC_PP = "dynamicPP"
    DYNAMIC_PPP = "dynamicPPP"
    DYNAMIC_PPPP = "dynamicPPPP"
    DYNAMIC_PPPPP = "dynamicPPPPP"
    DYNAMIC_PPPPPP = "dynamicPPPPPP"
    DYNAMIC_PIANO = "dynamicPiano"
    DYNAMIC_RINFORZANDO = "dynamicRinforzando"
    DYNAMIC_RINFORZANDO1 = "dynamicRinforzando1"
    DYNAMIC_RINFORZANDO2 = "dynamicRinforzando2"
    DYNAMIC_SFORZANDO = "dynamicSforzando"
    DYNAMIC_SFORZANDO1 = "dynamicSforzando1"
    DYNAMIC_SFORZANDO_PIANISSIMO = "dynamicSforzandoPianissimo"
    DYNAMIC_SFORZANDO_PIANO = "dynamicSforzandoPiano"
    DYNAMIC_SFORZATO = "dynamicSforzato"
    DYNAMIC_SFORZATO_FF = "dynamicSforzatoFF"
    DYNAMIC_SFORZATO_PIANO = "dynamicSforzatoPiano"
    DYNAMIC_Z = "dynamicZ"
    ELEC_AUDIO_CHANNELS_EIGHT = "elecAudioChannelsEight"
    ELEC_AUDIO_CHANNELS_FIVE = "elecAudioChannelsFive"
    ELEC_AUDIO_CHANNELS_FOUR = "elecAudioChannelsFour"
    ELEC_AUDIO_CHANNELS_ONE = "elecAudioChannelsOne"
    ELEC_AUDIO_CHANNELS_SEVEN = "elecAudioChannelsSeven"
    ELEC_AUDIO_CHANNELS_SIX = "elecAudioChannelsSix"
    ELEC_AUDIO_CHANNELS_THREE_FRONTAL = "elecAudioChannelsThreeFrontal"
    ELEC_AUDIO_CHANNELS_THREE_SURROUND = "elecAudioChannelsThreeSurround"
    ELEC_AUDIO_CHANNELS_TWO = "elecAudioChannelsTwo"
    ELEC_AUDIO_IN = "elecAudioIn"
    ELEC_AUDIO_MONO = "elecAudioMono"
    ELEC_AUDIO_OUT = "elecAudioOut"
    ELEC_AUDIO_STEREO = "elecAudioStereo"
    ELEC_DATA_IN = "elecDataIn"
    ELEC_DATA_OUT = "elecDataOut"
    ELEC_DISC = "elecDisc"
    ELEC_DOWNLOAD = "elecDownload"
    ELEC_EJECT = "elecEject"
    ELEC_FAST_FORWARD = "elecFastForward"
    ELEC_HEADPHONES = "elecHeadphones"
    ELEC_HEADSET = "elecHeadset"
    ELEC_LINE_IN = "elecLineIn"
    ELEC_LINE_OUT = "elecLineOut"
    ELEC_LOOP = "elecLoop"
    ELEC_LOUDSPEAKER = "elecLoudspeaker"
    ELEC_MIDICONTROLLER0 = "elecMIDIController0"
    ELEC_MIDICONTROLLER100 = "elecMIDIController100"
    ELEC_MIDICONTROLLER20 = "elecMIDIController20"
    ELEC_MIDICONTROLLER40 = "elecMIDIController40"
    ELEC_MIDICONTROLLER60 = "elecMIDIController60"
    ELEC_MIDICONTROLLER80 = "elecMIDIController80"
    ELEC_MIDIIN = "elecMIDIIn"
    ELEC_MIDIOUT = "elecMIDIOut"
    ELEC_MICROPHONE = "elecMicrophone"
    ELEC_MICROPHONE_MUTE = "elecMicrophoneMute"
    ELEC_MICROPHONE_UNMUTE = "elecMicrophoneUnmute"
    ELEC_MONITOR = "elecMonitor"
    ELEC_MUTE = "elecMute"
    ELEC_PAUSE = "elecPause"
    ELEC_PLAY = "elecPlay"
    ELEC_POWER_ON_OFF = "elecPowerOnOff"
    ELEC_PROJECTOR = "elecProjector"
    ELEC_RECORD = "elecRecord"
    ELEC_REPLAY = "elecReplay"
    ELEC_REWIND = "elecRewind"
    ELEC_SHUFFLE = "elecShuffle"
    ELEC_SKIP_BACKWARDS = "elecSkipBackwards"
    ELEC_SKIP_FORWARDS = "elecSkipForwards"
    ELEC_STOP = "elecStop"
    ELEC_USB = "elecUSB"
    ELEC_UNMUTE = "elecUnmute"
    ELEC_UPLOAD = "elecUpload"
    ELEC_VIDEO_CAMERA = "elecVideoCamera"
    ELEC_VIDEO_IN = "elecVideoIn"
    ELEC_VIDEO_OUT = "elecVideoOut"
    ELEC_VOLUME_FADER = "elecVolumeFader"
    ELEC_VOLUME_FADER_THUMB = "elecVolumeFaderThumb"
    ELEC_VOLUME_LEVEL0 = "elecVolumeLevel0"
    ELEC_VOLUME_LEVEL100 = "elecVolumeLevel100"
    ELEC_VOLUME_LEVEL20 = "elecVolumeLevel20"
    ELEC_VOLUME_LEVEL40 = "elecVolumeLevel40"
    ELEC_VOLUME_LEVEL60 = "elecVolumeLevel60"
    ELEC_VOLUME_LEVEL80 = "elecVolumeLevel80"
    F_CLEF = "fClef"
    F_CLEF15MA = "fClef15ma"
    F_CLEF15MB = "fClef15mb"
    F_CLEF19TH_CENTURY = "fClef19thCentury"
    F_CLEF8VA = "fClef8va"
    F_CLEF8VB = "fClef8vb"
    F_CLEF_ARROW_DOWN = "fClefArrowDown"
    F_CLEF_ARROW_UP = "fClefArrowUp"
    F_CLEF_CHANGE = "fClefChange"
    F_CLEF_FRENCH = "fClefFrench"
    F_CLEF_REVERSED = "fClefReversed"
    F_CLEF_TRIANGULAR = "fClefTriangular"
    F_CLEF_TRIANGULAR_TO_CCLEF = "fClefTriangularToCClef"
    F_CLEF_TURNED = "fClefTurned"
    FERMATA_ABOVE = "fermataAbove"
    FERMATA_BELOW = "fermataBelow"
    FERMATA_LONG_ABOVE = "fermataLongAbove"
    FERMATA_LONG_BELOW = "fermataLongBelow"
    FERMATA_LONG_HENZE_ABOVE = "fermataLongHenzeAbove"
    FERMATA_LONG_HENZE_BELOW = "fermataLongHenzeBelow"
    FERMATA_SHORT_ABOVE = "fermataShortAbove"
    FERMATA_SHORT_BELOW = "fermataShortBelow"
    FERMATA_SHORT_HENZE_ABOVE = "fermataShortHenzeAbove"
    FERMATA_SHORT_HENZE_BELOW = "fermataShortHenzeBelow"
    FERMATA_VERY_LONG_ABOVE = "fermataVeryLongAbove"
    FERMATA_VERY_LONG_BELOW = "fermataVeryLongBelow"
    FERMATA_VERY_SHORT_ABOVE = "fermataVeryShortAbove"
    FERMATA_VERY_SHORT_BELOW = "fermataVeryShortBelow"
    FIGBASS0 = "figbass0"
    FIGBASS1 = "figbass1"
    FIGBASS2 = "figbass2"
    FIGBASS2_RAISED = "figbass2Raised"
    FIGBASS3 = "figbass3"
    FIGBASS4 = "figbass4"
    FIGBASS4_RAISED = "figbass4Raised"
    FIGBASS5 = "figbass5"
    FIGBASS5_RAISED1 = "figbass5Raised1"
    FIGBASS5_RAISED2 = "figbass5Raised2"
    FIGBASS5_RAISED3 = "figbass5Raised3"
    FIGBASS6 = "figbass6"
    FIGBASS6_RAISED = "figbass6Raised"
    FIGBASS6_RAISED2 = "figbass6Raised2"
    FIGBASS7 = "figbass7"
    FIGBASS7_DIMINISHED = "figbass7Diminished"
    FIGBASS7_RAISED1 = "figbass7Raised1"
    FIGBASS7_RAISED2 = "figbass7Raised2"
    FIGBASS8 = "figbass8"
    FIGBASS9 = "figbass9"
    FIGBASS9_RAISED = "figbass9Raised"
    FIGBASS_BRACKET_LEFT = "figbassBracketLeft"
    FIGBASS_BRACKET_RIGHT = "figbassBracketRight"
    FIGBASS_COMBINING_LOWERING = "figbassCombiningLowering"
    FIGBASS_COMBINING_RAISING = "figbassCombiningRaising"
    FIGBASS_DOUBLE_FLAT = "figbassDoubleFlat"
    FIGBASS_DOUBLE_SHARP = "figbassDoubleSharp"
    FIGBASS_FLAT = "figbassFlat"
    FIGBASS_NATURAL = "figbassNatural"
    FIGBASS_PARENS_LEFT = "figbassParensLeft"
    FIGBASS_PARENS_RIGHT = "figbassParensRight"
    FIGBASS_PLUS = "figbassPlus"
    FIGBASS_SHARP = "figbassSharp"
    FIGBASS_TRIPLE_FLAT = "figbassTripleFlat"
    FIGBASS_TRIPLE_SHARP = "figbassTripleSharp"
    FINGERING0 = "fingering0"
    FINGERING0_ITALIC = "fingering0Italic"
    FINGERING1 = "fingering1"
    FINGERING1_ITALIC = "fingering1Italic"
    FINGERING2 = "fingering2"
    FINGERING2_ITALIC = "fingering2Italic"
    FINGERING3 = "fingering3"
    FINGERING3_ITALIC = "fingering3Italic"
    FINGERING4 = "fingering4"
    FINGERING4_ITALIC = "fingering4Italic"
    FINGERING5 = "fingering5"
    FINGERING5_ITALIC = "fingering5Italic"
    FINGERING6 = "fingering6"
    FINGERING6_ITALIC = "fingering6Italic"
    FINGERING7 = "fingering7"
    FINGERING7_ITALIC = "fingering7Italic"
    FINGERING8 = "fingering8"
    FINGERING8_ITALIC = "fingering8Italic"
    FINGERING9 = "fingering9"
    FINGERING9_ITALIC = "fingering9Italic"
    FINGERING_ALOWER = "fingeringALower"
    FINGERING_CLOWER = "fingeringCLower"
    FINGERING_ELOWER = "fingeringELower"
    FINGERING_ILOWER = "fingeringILower"
    FINGERING_LEFT_BRACKET = "fingeringLeftBracket"
    FINGERING_LEFT_BRACKET_ITALIC = "fingeringLeftBracketItalic"
    FINGERING_LEFT_PARENTHESIS = "fingeringLeftParenthesis"
    FINGERING_LEFT_PARENTHESIS_ITALIC = "fingeringLeftParenthesisItalic"
    FINGERING_MLOWER = "fingeringMLower"
    FINGERING_MULTIPLE_NOTES = "fingeringMultipleNotes"
    FINGERING_OLOWER = "fingeringOLower"
    FINGERING_PLOWER = "fingeringPLower"
    FINGERING_PARENS_LEFT = "fingeringParensLeft"
    FINGERING_PARENS_RIGHT = "fingeringParensRight"
    FINGERING_QLOWER = "fingeringQLower"
    FINGERING_RIGHT_BRACKET = "fingeringRightBracket"
    FINGERING_RIGHT_BRACKET_ITALIC = "fingeringRightBracketItalic"
    FINGERING_RIGHT_PARENTHESIS = "fingeringRightParenthesis"
    FINGERING_RIGHT_PARENTHESIS_ITALIC = "fingeringRightParenthesisItalic"
    FINGERING_SLOWER = "fingeringSLower"
    FINGERING_SEPARATOR_MIDDLE_DOT = "fingeringSeparatorMiddleDot"
    FINGERING_SEPARATOR_MIDDLE_DOT_WHITE = "fingeringSeparatorMiddleDotWhite"
    FINGERING_SEPARATOR_SLASH = "fingeringSeparatorSlash"
    FINGERING_SUBSTITUTION_ABOVE = "fingeringSubstitutionAbove"
    FINGERING_SUBSTITUTION_BELOW = "fingeringSubstitutionBelow"
    FINGERING_SUBSTITUTION_DASH = "fingeringSubstitutionDash"
    FINGERING_TLOWER = "fingeringTLower"
    FINGERING_TUPPER = "fingeringTUpper"
    FINGERING_XLOWER = "fingeringXLower"
    FLAG1024TH_DOWN = "flag1024thDown"
    FLAG1024TH_UP = "flag1024thUp"
    FLAG128TH_DOWN = "flag128thDown"
    FLAG128TH_UP = "flag128thUp"
    FLAG16TH_DOWN = "flag16thDown"
    FLAG16TH_UP = "flag16thUp"
    FLAG256TH_DOWN = "flag256thDown"
    FLAG256TH_UP = "flag256thUp"
    FLAG32ND_DOWN = "flag32ndDown"
    FLAG32ND_UP = "flag32ndUp"
    FLAG512TH_DOWN = "flag512thDown"
    FLAG512TH_UP = "flag512thUp"
    FLAG64TH_DOWN = "flag64thDown"
    FLAG64TH_UP = "flag64thUp"
    FLAG8TH_DOWN = "flag8thDown"
    FLAG8TH_UP = "flag8thUp"
    FLAG_INTERNAL_DOWN = "flagInternalDown"
    FLAG_INTERNAL_UP = "flagInternalUp"
    FRETBOARD3_STRING = "fretboard3String"
    FRETBOARD3_STRING_NUT = "fretboard3StringNut"
    FRETBOARD4_STRING = "fretboard4String"
    FRETBOARD4_STRING_NUT = "fretboard4StringNut"
    FRETBOARD5_STRING = "fretboard5String"
    FRETBOARD5_STRING_NUT = "fretboard5StringNut"
    FRETBOARD6_STRING = "fretboard6String"
    FRETBOARD6_STRING_NUT = "fretboard6StringNut"
    FRETBOARD_FILLED_CIRCLE = "fretboardFilledCircle"
    FRETBOARD_O = "fretboardO"
    FRETBOARD_X = "fretboardX"
    FUNCTION_ANGLE_LEFT = "functionAngleLeft"
    FUNCTION_ANGLE_RIGHT = "functionAngleRight"
    FUNCTION_BRACKET_LEFT = "functionBracketLeft"
    FUNCTION_BRACKET_RIGHT = "functionBracketRight"
    FUNCTION_DD = "functionDD"
    FUNCTION_DLOWER = "functionDLower"
    FUNCTION_DUPPER = "functionDUpper"
    FUNCTION_EIGHT = "functionEight"
    FUNCTION_FIVE = "functionFive"
    FUNCTION_FOUR = "functionFour"
    FUNCTION_GLOWER = "functionGLower"
    FUNCTION_GUPPER = "functionGUpper"
    FUNCTION_GREATER_THAN = "functionGreaterThan"
    FUNCTION_LESS_THAN = "functionLessThan"
    FUNCTION_MINUS = "functionMinus"
    FUNCTION_NLOWER = "functionNLower"
    FUNCTION_NUPPER = "functionNUpper"
    FUNCTION_NINE = "functionNine"
    FUNCTION_ONE = "functionOne"
    FUNCTION_PLOWER = "functionPLower"
    FUNCTION_PUPPER = "functionPUpper"
    FUNCTION_PARENS_LEFT = "functionParensLeft"
    FUNCTION_PARENS_RIGHT = "functionParensRight"
    FUNCTION_PLUS = "functionPlus"
    FUNCTION_REPETITION1 = "functionRepetition1"
    FUNCTION_REPETITION2 = "functionRepetition2"
    FUNCTION_RING = "functionRing"
    FUNCTION_SLOWER = "functionSLower"
    FUNCTION_SSLOWER = "functionSSLower"
    FUNCTION_SSUPPER = "functionSSUpper"
    FUNCTION_SUPPER = "functionSUpper"
    FUNCTION_SEVEN = "functionSeven"
    FUNCTION_SIX = "functionSix"
    FUNCTION_SLASHED_DD = "functionSlashedDD"
    FUNCTION_TLOWER = "functionTLower"
    FUNCTION_TUPPER = "functionTUpper"
    FUNCTION_THREE = "functionThree"
    FUNCTION_TWO = "functionTwo"
    FUNCTION_VLOWER = "functionVLower"
    FUNCTION_VUPPER = "functionVUpper"
    FUNCTION_ZERO = "functionZero"
    G_CLEF = "gClef"
    G_CLEF15MA = "gClef15ma"
    G_CLEF15MB = "gClef15mb"
    G_CLEF8VA = "gClef8va"
    G_CLEF8VB = "gClef8vb"
    G_CLEF8VB_CCLEF = "gClef8vbCClef"
    G_CLEF8VB_OLD = "gClef8vbOld"
    G_CLEF8VB_PARENS = "gClef8vbParens"
    G_CLEF_ARROW_DOWN = "gClefArrowDown"
    G_CLEF_ARROW_UP = "gClefArrowUp"
    G_CLEF_CHANGE = "gClefChange"
    G_CLEF_LIGATED_NUMBER_ABOVE = "gClefLigatedNumberAbove"
    G_CLEF_LIGATED_NUMBER_BELOW = "gClefLigatedNumberBelow"
    G_CLEF_REVERSED = "gClefReversed"
    G_CLEF_TURNED = "gClefTurned"
    GRACE_NOTE_ACCIACCATURA_STEM_DOWN = "graceNoteAcciaccaturaStemDown"
    GRACE_NOTE_ACCIACCATURA_STEM_UP = "graceNoteAcciaccaturaStemUp"
    GRACE_NOTE_APPOGGIATURA_STEM_DOWN = "graceNoteAppoggiaturaStemDown"
    GRACE_NOTE_APPOGGIATURA_STEM_UP = "graceNoteAppoggiaturaStemUp"
    GRACE_NOTE_SLASH_STEM_DOWN = "graceNoteSlashStemDown"
    GRACE_NOTE_SLASH_STEM_UP = "graceNoteSlashStemUp"
    GUITAR_BARRE_FULL = "guitarBarreFull"
    GUITAR_BARRE_HALF = "guitarBarreHalf"
    GUITAR_CLOSE_PEDAL = "guitarClosePedal"
    GUITAR_FADE_IN = "guitarFadeIn"
    GUITAR_FADE_OUT = "guitarFadeOut"
    GUITAR_GOLPE = "guitarGolpe"
    GUITAR_HALF_OPEN_PEDAL = "guitarHalfOpenPedal"
    GUITAR_LEFT_HAND_TAPPING = "guitarLeftHandTapping"
    GUITAR_OPEN_PEDAL = "guitarOpenPedal"
    GUITAR_RIGHT_HAND_TAPPING = "guitarRightHandTapping"
    GUITAR_SHAKE = "guitarShake"
    GUITAR_STRING0 = "guitarString0"
    GUITAR_STRING1 = "guitarString1"
    GUITAR_STRING10 = "guitarString10"
    GUITAR_STRING11 = "guitarString11"
    GUITAR_STRING12 = "guitarString12"
    GUITAR_STRING13 = "guitarString13"
    GUITAR_STRING2 = "guitarString2"
    GUITAR_STRING3 = "guitarString3"
    GUITAR_STRING4 = "guitarString4"
    GUITAR_STRING5 = "guitarString5"
    GUITAR_STRING6 = "guitarString6"
    GUITAR_STRING7 = "guitarString7"
    GUITAR_STRING8 = "guitarString8"
    GUITAR_STRING9 = "guitarString9"
    GUITAR_STRUM_DOWN = "guitarStrumDown"
    GUITAR_STRUM_UP = "guitarStrumUp"
    GUITAR_VIBRATO_BAR_DIP = "guitarVibratoBarDip"
    GUITAR_VIBRATO_BAR_SCOOP = "guitarVibratoBarScoop"
    GUITAR_VIBRATO_STROKE = "guitarVibratoStroke"
    GUITAR_VOLUME_SWELL = "guitarVolumeSwell"
    GUITAR_WIDE_VIBRATO_STROKE = "guitarWideVibratoStroke"
    HANDBELLS_BELLTREE = "handbellsBelltree"
    HANDBELLS_DAMP3 = "handbellsDamp3"
    HANDBELLS_ECHO1 = "handbellsEcho1"
    HANDBELLS_ECHO2 = "handbellsEcho2"
    HANDBELLS_GYRO = "handbellsGyro"
    HANDBELLS_HAND_MARTELLATO = "handbellsHandMartellato"
    HANDBELLS_MALLET_BELL_ON_TABLE = "handbellsMalletBellOnTable"
    HANDBELLS_MALLET_BELL_SUSPENDED = "handbellsMalletBellSuspended"
    HANDBELLS_MALLET_LFT = "handbellsMalletLft"
    HANDBELLS_MARTELLATO = "handbellsMartellato"
    HANDBELLS_MARTELLATO_LIFT = "handbellsMartellatoLift"
    HANDBELLS_MUTED_MARTELLATO = "handbellsMutedMartellato"
    HANDBELLS_PLUCK_LIFT = "handbellsPluckLift"
    HANDBELLS_SWING = "handbellsSwing"
    HANDBELLS_SWING_DOWN = "handbellsSwingDown"
    HANDBELLS_SWING_UP = "handbellsSwingUp"
    HANDBELLS_TABLE_PAIR_BELLS = "handbellsTablePairBells"
    HANDBELLS_TABLE_SINGLE_BELL = "handbellsTableSingleBell"
    HARP_METAL_ROD = "harpMetalRod"
    HARP_PEDAL_CENTERED = "harpPedalCentered"
    HARP_PEDAL_DIVIDER = "harpPedalDivider"
    HARP_PEDAL_LOWERED = "harpPedalLowered"
    HARP_PEDAL_RAISED = "harpPedalRaised"
    HARP_SALZEDO_AEOLIAN_ASCENDING = "harpSalzedoAeolianAscending"
    HARP_SALZEDO_AEOLIAN_DESCENDING = "harpSalzedoAeolianDescending"
    HARP_SALZEDO_DAMP_ABOVE = "harpSalzedoDampAbove"
    HARP_SALZEDO_DAMP_BOTH_HANDS = "harpSalzedoDampBothHands"
    HARP_SALZEDO_DAMP_LOW_STRINGS = "harpSalzedoDampLowStrings"
    HARP_SALZEDO_FLUIDIC_SOUNDS_LEFT = "harpSalzedoFluidicSoundsLeft"
    HARP_SALZEDO_FLUIDIC_SOUNDS_RIGHT = "harpSalzedoFluidicSoundsRight"
    HARP_SALZEDO_ISOLATED_SOUNDS = "harpSalzedoIsolatedSounds"
    HARP_SALZEDO_METALLIC_SOUNDS = "harpSalzedoMetallicSounds"
    HARP_SALZEDO_MUFFLE_TOTALLY = "harpSalzedoMuffleTotally"
    HARP_SALZEDO_OBOIC_FLUX = "harpSalzedoOboicFlux"
    HARP_SALZEDO_PLAY_UPPER_END = "harpSalzedoPlayUpperEnd"
    HARP_SALZEDO_SLIDE_WITH_SUPPLENESS = "harpSalzedoSlideWithSuppleness"
    HARP_SALZEDO_TAM_TAM_SOUNDS = "harpSalzedoTamTamSounds"
    HARP_SALZEDO_THUNDER_EFFECT = "harpSalzedoThunderEffect"
    HARP_SALZEDO_TIMPANIC_SOUNDS = "harpSalzedoTimpanicSounds"
    HARP_SALZEDO_WHISTLING_SOUNDS = "harpSalzedoWhistlingSounds"
    HARP_STRING_NOISE_STEM = "harpStringNoiseStem"
    HARP_TUNING_KEY = "harpTuningKey"
    HARP_TUNING_KEY_GLISSANDO = "harpTuningKeyGlissando"
    HARP_TUNING_KEY_HANDLE = "harpTuningKeyHandle"
    HARP_TUNING_KEY_SHANK = "harpTuningKeyShank"
    KEYBOARD_BEBUNG2_DOTS_ABOVE = "keyboardBebung2DotsAbove"
    KEYBOARD_BEBUNG2_DOTS_BELOW = "keyboardBebung2DotsBelow"
    KEYBOARD_BEBUNG3_DOTS_ABOVE = "keyboardBebung3DotsAbove"
    KEYBOARD_BEBUNG3_DOTS_BELOW = "keyboardBebung3DotsBelow"
    KEYBOARD_BEBUNG4_DOTS_ABOVE = "keyboardBebung4DotsAbove"
    KEYBOARD_BEBUNG4_DOTS_BELOW = "keyboardBebung4DotsBelow"
    KEYBOARD_LEFT_PEDAL_PICTOGRAM = "keyboardLeftPedalPictogram"
    KEYBOARD_MIDDLE_PEDAL_PICTOGRAM = "keyboardMiddlePedalPictogram"
    KEYBOARD_PEDAL_D = "keyboardPedalD"
    KEYBOARD_PEDAL_DOT = "keyboardPedalDot"
    KEYBOARD_PEDAL_E = "keyboardPedalE"
    KEYBOARD_PEDAL_HALF = "keyboardPedalHalf"
    KEYBOARD_PEDAL_HALF2 = "keyboardPedalHalf2"
    KEYBOARD_PEDAL_HALF3 = "keyboardPedalHalf3"
    KEYBOARD_PEDAL_HEEL1 = "keyboardPedalHeel1"
    KEYBOARD_PEDAL_HEEL2 = "keyboardPedalHeel2"
    KEYBOARD_PEDAL_HEEL3 = "keyboardPedalHeel3"
    KEYBOARD_PEDAL_HEEL_TOE = "keyboardPedalHeelToe"
    KEYBOARD_PEDAL_HOOK_END = "keyboardPedalHookEnd"
    KEYBOARD_PEDAL_HOOK_START = "keyboardPedalHookStart"
    KEYBOARD_PEDAL_HYPHEN = "keyboardPedalHyphen"
    KEYBOARD_PEDAL_P = "keyboardPedalP"
    KEYBOARD_PEDAL_PARENS_LEFT = "keyboardPedalParensLeft"
    KEYBOARD_PEDAL_PARENS_RIGHT = "keyboardPedalParensRight"
    KEYBOARD_PEDAL_PED = "keyboardPedalPed"
    KEYBOARD_PEDAL_S = "keyboardPedalS"
    KEYBOARD_PEDAL_SOST = "keyboardPedalSost"
    KEYBOARD_PEDAL_TOE1 = "keyboardPedalToe1"
    KEYBOARD_PEDAL_TOE2 = "keyboardPedalToe2"
    KEYBOARD_PEDAL_UP = "keyboardPedalUp"
    KEYBOARD_PEDAL_UP_NOTCH = "keyboardPedalUpNotch"
    KEYBOARD_PEDAL_UP_SPECIAL = "keyboardPedalUpSpecial"
    KEYBOARD_PLAY_WITH_LH = "keyboardPlayWithLH"
    KEYBOARD_PLAY_WITH_LHEND = "keyboardPlayWithLHEnd"
    KEYBOARD_PLAY_WITH_RH = "keyboardPlayWithRH"
    KEYBOARD_PLAY_WITH_RHEND = "keyboardPlayWithRHEnd"
    KEYBOARD_PLUCK_INSIDE = "keyboardPluckInside"
    KEYBOARD_RIGHT_PEDAL_PICTOGRAM = "keyboardRightPedalPictogram"
    KIEVAN_ACCIDENTAL_FLAT = "kievanAccidentalFlat"
    KIEVAN_ACCIDENTAL_SHARP = "kievanAccidentalSharp"
    KIEVAN_AUGMENTATION_DOT = "kievanAugmentationDot"
    KIEVAN_CCLEF = "kievanCClef"
    KIEVAN_ENDING_SYMBOL = "kievanEndingSymbol"
    KIEVAN_NOTE8TH_STEM_DOWN = "kievanNote8thStemDown"
    KIEVAN_NOTE8TH_STEM_UP = "kievanNote8thStemUp"
    KIEVAN_NOTE_BEAM = "kievanNoteBeam"
    KIEVAN_NOTE_HALF_STAFF_LINE = "kievanNoteHalfStaffLine"
    KIEVAN_NOTE_HALF_STAFF_SPACE = "kievanNoteHalfStaffSpace"
    KIEVAN_NOTE_QUARTER_STEM_DOWN = "kievanNoteQuarterStemDown"
    KIEVAN_NOTE_QUARTER_STEM_UP = "kievanNoteQuarterStemUp"
    KIEVAN_NOTE_RECITING = "kievanNoteReciting"
    KIEVAN_NOTE_WHOLE = "kievanNoteWhole"
    KIEVAN_NOTE_WHOLE_FINAL = "kievanNoteWholeFinal"
    KODALY_HAND_DO = "kodalyHandDo"
    KODALY_HAND_FA = "kodalyHandFa"
    KODALY_HAND_LA = "kodalyHandLa"
    KODALY_HAND_MI = "kodalyHandMi"
    KODALY_HAND_RE = "kodalyHandRe"
    KODALY_HAND_SO = "kodalyHandSo"
    KODALY_HAND_TI = "kodalyHandTi"
    LEFT_REPEAT_SMALL = "leftRepeatSmall"
    LEGER_LINE = "legerLine"
    LEGER_LINE_NARROW = "legerLineNarrow"
    LEGER_LINE_WIDE = "legerLineWide"
    LUTE_BARLINE_END_REPEAT = "luteBarlineEndRepeat"
    LUTE_BARLINE_FINAL = "luteBarlineFinal"
    LUTE_BARLINE_START_REPEAT = "luteBarlineStartRepeat"
    LUTE_DURATION16TH = "luteDuration16th"
    LUTE_DURATION32ND = "luteDuration32nd"
    LUTE_DURATION8TH = "luteDuration8th"
    LUTE_DURATION_DOUBLE_WHOLE = "luteDurationDoubleWhole"
    LUTE_DURATION_HALF = "luteDurationHalf"
    LUTE_DURATION_QUARTER = "luteDurationQuarter"
    LUTE_DURATION_WHOLE = "luteDurationWhole"
    LUTE_FINGERING_RHFIRST = "luteFingeringRHFirst"
    LUTE_FINGERING_RHSECOND = "luteFingeringRHSecond"
    LUTE_FINGERING_RHTHIRD = "luteFingeringRHThird"
    LUTE_FINGERING_RHTHUMB = "luteFingeringRHThumb"
    LUTE_FRENCH_FRET_A = "luteFrenchFretA"
    LUTE_FRENCH_FRET_B = "luteFrenchFretB"
    LUTE_FRENCH_FRET_C = "luteFrenchFretC"
    LUTE_FRENCH_FRET_D = "luteFrenchFretD"
    LUTE_FRENCH_FRET_E = "luteFrenchFretE"
    LUTE_FRENCH_FRET_F = "luteFrenchFretF"
    LUTE_FRENCH_FRET_G = "luteFrenchFretG"
    LUTE_FRENCH_FRET_H = "luteFrenchFretH"
    LUTE_FRENCH_FRET_I = "luteFrenchFretI"
    LUTE_FRENCH_FRET_K = "luteFrenchFretK"
    LUTE_FRENCH_FRET_L = "luteFrenchFretL"
    LUTE_FRENCH_FRET_M = "luteFrenchFretM"
    LUTE_FRENCH_FRET_N = "luteFrenchFretN"
    LUTE_ITALIAN_CLEF_CSOL_FA_UT = "luteItalianClefCSolFaUt"
    LUTE_ITALIAN_CLEF_FFA_UT = "luteItalianClefFFaUt"
    LUTE_ITALIAN_FRET0 = "luteItalianFret0"
    LUTE_ITALIAN_FRET1 = "luteItalianFret1"
    LUTE_ITALIAN_FRET2 = "luteItalianFret2"
    LUTE_ITALIAN_FRET3 = "luteItalianFret3"
    LUTE_ITALIAN_FRET4 = "luteItalianFret4"
    LUTE_ITALIAN_FRET5 = "luteItalianFret5"
    LUTE_ITALIAN_FRET6 = "luteItalianFret6"
    LUTE_ITALIAN_FRET7 = "luteItalianFret7"
    LUTE_ITALIAN_FRET8 = "luteItalianFret8"
    LUTE_ITALIAN_FRET9 = "luteItalianFret9"
    LUTE_ITALIAN_HOLD_FINGER = "luteItalianHoldFinger"
    LUTE_ITALIAN_HOLD_NOTE = "luteItalianHoldNote"
    LUTE_ITALIAN_RELEASE_FINGER = "luteItalianReleaseFinger"
    LUTE_ITALIAN_TEMPO_FAST = "luteItalianTempoFast"
    LUTE_ITALIAN_TEMPO_NEITHER_FAST_NOR_SLOW = "luteItalianTempoNeitherFastNorSlow"
    LUTE_ITALIAN_TEMPO_SLOW = "luteItalianTempoSlow"
    LUTE_ITALIAN_TEMPO_SOMEWHAT_FAST = "luteItalianTempoSomewhatFast"
    LUTE_ITALIAN_TEMPO_VERY_SLOW = "luteItalianTempoVerySlow"
    LUTE_ITALIAN_TIME_TRIPLE = "luteItalianTimeTriple"
    LUTE_ITALIAN_TREMOLO = "luteItalianTremolo"
    LUTE_ITALIAN_VIBRATO = "luteItalianVibrato"
    LUTE_STAFF6_LINES = "luteStaff6Lines"
    LUTE_STAFF6_LINES_NARROW = "luteStaff6LinesNarrow"
    LUTE_STAFF6_LINES_WIDE = "luteStaff6LinesWide"
    LYRICS_ELISION = "lyricsElision"
    LYRICS_ELISION_NARROW = "lyricsElisionNarrow"
    LYRICS_ELISION_WIDE = "lyricsElisionWide"
    LYRICS_HYPHEN_BASELINE = "lyricsHyphenBaseline"
    LYRICS_HYPHEN_BASELINE_NON_BREAKING = "lyricsHyphenBaselineNonBreaking"
    LYRICS_TEXT_REPEAT = "lyricsTextRepeat"
    MED_REN_FLAT_HARD_B = "medRenFlatHardB"
    MED_REN_FLAT_SOFT_B = "medRenFlatSoftB"
    MED_REN_FLAT_WITH_DOT = "medRenFlatWithDot"
    MED_REN_GCLEF_CMN = "medRenGClefCMN"
    MED_REN_LIQUESCENCE_CMN = "medRenLiquescenceCMN"
    MED_REN_LIQUESCENT_ASC_CMN = "medRenLiquescentAscCMN"
    MED_REN_LIQUESCENT_DESC_CMN = "medRenLiquescentDescCMN"
    MED_REN_NATURAL = "medRenNatural"
    MED_REN_NATURAL_WITH_CROSS = "medRenNaturalWithCross"
    MED_REN_ORISCUS_CMN = "medRenOriscusCMN"
    MED_REN_PLICA_CMN = "medRenPlicaCMN"
    MED_REN_PUNCTUM_CMN = "medRenPunctumCMN"
    MED_REN_QUILISMA_CMN = "medRenQuilismaCMN"
    MED_REN_SHARP_CROIX = "medRenSharpCroix"
    MED_REN_STROPHICUS = "medRenStrophicus"
    MENSURAL_BLACK_BREVIS = "mensuralBlackBrevis"
    MENSURAL_BLACK_BREVIS_VOID = "mensuralBlackBrevisVoid"
    MENSURAL_BLACK_DRAGMA = "mensuralBlackDragma"
    MENSURAL_BLACK_LONGA = "mensuralBlackLonga"
    MENSURAL_BLACK_MAXIMA = "mensuralBlackMaxima"
    MENSURAL_BLACK_MINIMA = "mensuralBlackMinima"
    MENSURAL_BLACK_MINIMA_VOID = "mensuralBlackMinimaVoid"
    MENSURAL_BLACK_SEMIBREVIS = "mensuralBlackSemibrevis"
    MENSURAL_BLACK_SEMIBREVIS_CAUDATA = "mensuralBlackSemibrevisCaudata"
    MENSURAL_BLACK_SEMIBREVIS_OBLIQUE = "mensuralBlackSemibrevisOblique"
    MENSURAL_BLACK_SEMIBREVIS_VOID = "mensuralBlackSemibrevisVoid"
    MENSURAL_BLACK_SEMIMINIMA = "mensuralBlackSemiminima"
    MENSURAL_CCLEF = "mensuralCclef"
    MENSURAL_CCLEF_PETRUCCI_POS_HIGH = "mensuralCclefPetrucciPosHigh"
    MENSURAL_CCLEF_PETRUCCI_POS_HIGHEST = "mensuralCclefPetrucciPosHighest"
    MENSURAL_CCLEF_PETRUCCI_POS_LOW = "mensuralCclefPetrucciPosLow"
    MENSURAL_CCLEF_PETRUCCI_POS_LOWEST = "mensuralCclefPetrucciPosLowest"
    MENSURAL_CCLEF_PETRUCCI_POS_MIDDLE = "mensuralCclefPetrucciPosMiddle"
    MENSURAL_COLORATION_END_ROUND = "mensuralColorationEndRound"
    MENSURAL_COLORATION_END_SQUARE = "mensuralColorationEndSquare"
    MENSURAL_COLORATION_START_ROUND = "mensuralColorationStartRound"
    MENSURAL_COLORATION_START_SQUARE = "mensuralColorationStartSquare"
    MENSURAL_COMB_STEM_DIAGONAL = "mensuralCombStemDiagonal"
    MENSURAL_COMB_STEM_DOWN = "mensuralCombStemDown"
    MENSURAL_COMB_STEM_DOWN_FLAG_EXTENDED = "mensuralCombStemDownFlagExtended"
    MENSURAL_COMB_STEM_DOWN_FLAG_FLARED = "mensuralCombStemDownFlagFlared"
    MENSURAL_COMB_STEM_DOWN_FLAG_FUSA = "mensuralCombStemDownFlagFusa"
    MENSURAL_COMB_STEM_DOWN_FLAG_LEFT = "mensuralCombStemDownFlagLeft"
    MENSURAL_COMB_STEM_DOWN_FLAG_RIGHT = "mensuralCombStemDownFlagRight"
    MENSURAL_COMB_STEM_DOWN_FLAG_SEMIMINIMA = "mensuralCombStemDownFlagSemiminima"
    MENSURAL_COMB_STEM_UP = "mensuralCombStemUp"
    MENSURAL_COMB_STEM_UP_FLAG_EXTENDED = "mensuralCombStemUpFlagExtended"
    MENSURAL_COMB_STEM_UP_FLAG_FLARED = "mensuralCombStemUpFlagFlared"
    MENSURAL_COMB_STEM_UP_FLAG_FUSA = "mensuralCombStemUpFlagFusa"
    MENSURAL_COMB_STEM_UP_FLAG_LEFT = "mensuralCombStemUpFlagLeft"
    MENSURAL_COMB_STEM_UP_FLAG_RIGHT = "mensuralCombStemUpFlagRight"
    MENSURAL_COMB_STEM_UP_FLAG_SEMIMINIMA = "mensuralCombStemUpFlagSemiminima"
    MENSURAL_CUSTOS_CHECKMARK = "mensuralCustosCheckmark"
    MENSURAL_CUSTOS_DOWN = "mensuralCustosDown"
    MENSURAL_CUSTOS_TURN = "mensuralCustosTurn"
    MENSURAL_CUSTOS_UP = "mensuralCustosUp"
    MENSURAL_FCLEF = "mensuralFclef"
    MENSURAL_FCLEF_PETRUCCI = "mensuralFclefPetrucci"
    MENSURAL_GCLEF = "mensuralGclef"
    MENSURAL_GCLEF_PETRUCCI = "mensuralGclefPetrucci"
    MENSURAL_MODUS_IMPERFECTUM_VERT = "mensuralModusImperfectumVert"
    MENSURAL_MODUS_PERFECTUM_VERT = "mensuralModusPerfectumVert"
    MENSURAL_NOTEHEAD_LONGA_BLACK = "mensuralNoteheadLongaBlack"
    MENSURAL_NOTEHEAD_LONGA_BLACK_VOID = "mensuralNoteheadLongaBlackVoid"
    MENSURAL_NOTEHEAD_LONGA_VOID = "mensuralNoteheadLongaVoid"
    MENSURAL_NOTEHEAD_LONGA_WHITE = "mensuralNoteheadLongaWhite"
    MENSURAL_NOTEHEAD_MAXIMA_BLACK = "mensuralNoteheadMaximaBlack"
    MENSURAL_NOTEHEAD_MAXIMA_BLACK_VOID = "mensuralNoteheadMaximaBlackVoid"
    MENSURAL_NOTEHEAD_MAXIMA_VOID = "mensuralNoteheadMaximaVoid"
    MENSURAL_NOTEHEAD_MAXIMA_WHITE = "mensuralNoteheadMaximaWhite"
    MENSURAL_NOTEHEAD_MINIMA_WHITE = "mensuralNoteheadMinimaWhite"
    MENSURAL_NOTEHEAD_SEMIBREVIS_BLACK = "mensuralNoteheadSemibrevisBlack"
    MENSURAL_NOTEHEAD_SEMIBREVIS_BLACK_VOID = "mensuralNoteheadSemibrevisBlackVoid"
    MENSURAL_NOTEHEAD_SEMIBREVIS_BLACK_VOID_TURNED = "mensuralNoteheadSemibrevisBlackVoidTurned"
    MENSURAL_NOTEHEAD_SEMIBREVIS_VOID = "mensuralNoteheadSemibrevisVoid"
    MENSURAL_NOTEHEAD_SEMIMINIMA_WHITE = "mensuralNoteheadSemiminimaWhite"
    MENSURAL_OBLIQUE_ASC2ND_BLACK = "mensuralObliqueAsc2ndBlack"
    MENSURAL_OBLIQUE_ASC2ND_BLACK_VOID = "mensuralObliqueAsc2ndBlackVoid"
    MENSURAL_OBLIQUE_ASC2ND_VOID = "mensuralObliqueAsc2ndVoid"
    MENSURAL_OBLIQUE_ASC2ND_WHITE = "mensuralObliqueAsc2ndWhite"
    MENSURAL_OBLIQUE_ASC3RD_BLACK = "mensuralObliqueAsc3rdBlack"
    MENSURAL_OBLIQUE_ASC3RD_BLACK_VOID = "mensuralObliqueAsc3rdBlackVoid"
    MENSURAL_OBLIQUE_ASC3RD_VOID = "mensuralObliqueAsc3rdVoid"
    MENSURAL_OBLIQUE_ASC3RD_WHITE = "mensuralObliqueAsc3rdWhite"
    MENSURAL_OBLIQUE_ASC4TH_BLACK = "mensuralObliqueAsc4thBlack"
    MENSURAL_OBLIQUE_ASC4TH_BLACK_VOID = "mensuralObliqueAsc4thBlackVoid"
    MENSURAL_OBLIQUE_ASC4TH_VOID = "mensuralObliqueAsc4thVoid"
    MENSURAL_OBLIQUE_ASC4TH_WHITE = "mensuralObliqueAsc4thWhite"
    MENSURAL_OBLIQUE_ASC5TH_BLACK = "mensuralObliqueAsc5thBlack"
    MENSURAL_OBLIQUE_ASC5TH_BLACK_VOID = "mensuralObliqueAsc5thBlackVoid"
    MENSURAL_OBLIQUE_ASC5TH_VOID = "mensuralObliqueAsc5thVoid"
    MENSURAL_OBLIQUE_ASC5TH_WHITE = "mensuralObliqueAsc5thWhite"
    MENSURAL_OBLIQUE_DESC2ND_BLACK = "mensuralObliqueDesc2ndBlack"
    MENSURAL_OBLIQUE_DESC2ND_BLACK_VOID = "mensuralObliqueDesc2ndBlackVoid"
    MENSURAL_OBLIQUE_DESC2ND_VOID = "mensuralObliqueDesc2ndVoid"
    MENSURAL_OBLIQUE_DESC2ND_WHITE = "mensuralObliqueDesc2ndWhite"
    MENSURAL_OBLIQUE_DESC3RD_BLACK = "mensuralObliqueDesc3rdBlack"
    MENSURAL_OBLIQUE_DESC3RD_BLACK_VOID = "mensuralObliqueDesc3rdBlackVoid"
    MENSURAL_OBLIQUE_DESC3RD_VOID = "mensuralObliqueDesc3rdVoid"
    MENSURAL_OBLIQUE_DESC3RD_WHITE = "mensuralObliqueDesc3rdWhite"
    MENSURAL_OBLIQUE_DESC4TH_BLACK = "mensuralObliqueDesc4thBlack"
    MENSURAL_OBLIQUE_DESC4TH_BLACK_VOID = "mensuralObliqueDesc4thBlackVoid"
    MENSURAL_OBLIQUE_DESC4TH_VOID = "mensuralObliqueDesc4thVoid"
    MENSURAL_OBLIQUE_DESC4TH_WHITE = "mensuralObliqueDesc4thWhite"
    MENSURAL_OBLIQUE_DESC5TH_BLACK = "mensuralObliqueDesc5thBlack"
    MENSURAL_OBLIQUE_DESC5TH_BLACK_VOID = "mensuralObliqueDesc5thBlackVoid"
    MENSURAL_OBLIQUE_DESC5TH_VOID = "mensuralObliqueDesc5thVoid"
    MENSURAL_OBLIQUE_DESC5TH_WHITE = "mensuralObliqueDesc5thWhite"
    MENSURAL_PROLATION1 = "mensuralProlation1"
    MENSURAL_PROLATION10 = "mensuralProlation10"
    MENSURAL_PROLATION11 = "mensuralProlation11"
    MENSURAL_PROLATION2 = "mensuralProlation2"
    MENSURAL_PROLATION3 = "mensuralProlation3"
    MENSURAL_PROLATION4 = "mensuralProlation4"
    MENSURAL_PROLATION5 = "mensuralProlation5"
    MENSURAL_PROLATION6 = "mensuralProlation6"
    MENSURAL_PROLATION7 = "mensuralProlation7"
    MENSURAL_PROLATION8 = "mensuralProlation8"
    MENSURAL_PROLATION9 = "mensuralProlation9"
    MENSURAL_PROLATION_COMBINING_DOT = "mensuralProlationCombiningDot"
    MENSURAL_PROLATION_COMBINING_DOT_VOID = "mensuralProlationCombiningDotVoid"
    MENSURAL_PROLATION_COMBINING_STROKE = "mensuralProlationCombiningStroke"
    MENSURAL_PROLATION_COMBINING_THREE_DOTS = "mensuralProlationCombiningThreeDots"
    MENSURAL_PROLATION_COMBINING_THREE_DOTS_TRI = "mensuralProlationCombiningThreeDotsTri"
    MENSURAL_PROLATION_COMBINING_TWO_DOTS = "mensuralProlationCombiningTwoDots"
    MENSURAL_REST_BREVIS = "mensuralRestBrevis"
    MENSURAL_REST_FUSA = "mensuralRestFusa"
    MENSURAL_REST_LONGA_IMPERFECTA = "mensuralRestLongaImperfecta"
    MENSURAL_REST_LONGA_PERFECTA = "mensuralRestLongaPerfecta"
    MENSURAL_REST_MAXIMA = "mensuralRestMaxima"
    MENSURAL_REST_MINIMA = "mensuralRestMinima"
    MENSURAL_REST_SEMIBREVIS = "mensuralRestSemibrevis"
    MENSURAL_REST_SEMIFUSA = "mensuralRestSemifusa"
    MENSURAL_REST_SEMIMINIMA = "mensuralRestSemiminima"
    MENSURAL_SIGNUM_DOWN = "mensuralSignumDown"
    MENSURAL_SIGNUM_UP = "mensuralSignumUp"
    MENSURAL_TEMPUS_IMPERFECTUM_HORIZ = "mensuralTempusImperfectumHoriz"
    MENSURAL_TEMPUS_PERFECTUM_HORIZ = "mensuralTempusPerfectumHoriz"
    MENSURAL_WHITE_BREVIS = "mensuralWhiteBrevis"
    MENSURAL_WHITE_FUSA = "mensuralWhiteFusa"
    MENSURAL_WHITE_LONGA = "mensuralWhiteLonga"
    MENSURAL_WHITE_MAXIMA = "mensuralWhiteMaxima"
    MENSURAL_WHITE_MINIMA = "mensuralWhiteMinima"
    MENSURAL_WHITE_SEMIMINIMA = "mensuralWhiteSemiminima"
    MET_AUGMENTATION_DOT = "metAugmentationDot"
    MET_NOTE1024TH_DOWN = "metNote1024thDown"
    MET_NOTE1024TH_UP = "metNote1024thUp"
    MET_NOTE128TH_DOWN = "metNote128thDown"
    MET_NOTE128TH_UP = "metNote128thUp"
    MET_NOTE16TH_DOWN = "metNote16thDown"
    MET_NOTE16TH_UP = "metNote16thUp"
    MET_NOTE256TH_DOWN = "metNote256thDown"
    MET_NOTE256TH_UP = "metNote256thUp"
    MET_NOTE32ND_DOWN = "metNote32ndDown"
    MET_NOTE32ND_UP = "metNote32ndUp"
    MET_NOTE512TH_DOWN = "metNote512thDown"
    MET_NOTE512TH_UP = "metNote512thUp"
    MET_NOTE64TH_DOWN = "metNote64thDown"
    MET_NOTE64TH_UP = "metNote64thUp"
    MET_NOTE8TH_DOWN = "metNote8thDown"
    MET_NOTE8TH_UP = "metNote8thUp"
    MET_NOTE_DOUBLE_WHOLE = "metNoteDoubleWhole"
    MET_NOTE_DOUBLE_WHOLE_SQUARE = "metNoteDoubleWholeSquare"
    MET_NOTE_HALF_DOWN = "metNoteHalfDown"
    MET_NOTE_HALF_UP = "metNoteHalfUp"
    MET_NOTE_QUARTER_DOWN = "metNoteQuarterDown"
    MET_NOTE_QUARTER_UP = "metNoteQuarterUp"
    MET_NOTE_WHOLE = "metNoteWhole"
    MISC_DO_NOT_COPY = "miscDoNotCopy"
    MISC_DO_NOT_PHOTOCOPY = "miscDoNotPhotocopy"
    MISC_EYEGLASSES = "miscEyeglasses"
    NOTE1024TH_DOWN = "note1024thDown"
    NOTE1024TH_UP = "note1024thUp"
    NOTE128TH_DOWN = "note128thDown"
    NOTE128TH_UP = "note128thUp"
    NOTE16TH_DOWN = "note16thDown"
    NOTE16TH_UP = "note16thUp"
    NOTE256TH_DOWN = "note256thDown"
    NOTE256TH_UP = "note256thUp"
    NOTE32ND_DOWN = "note32ndDown"
    NOTE32ND_UP = "note32ndUp"
    NOTE512TH_DOWN = "note512thDown"
    NOTE512TH_UP = "note512thUp"
    NOTE64TH_DOWN = "note64thDown"
    NOTE64TH_UP = "note64thUp"
    NOTE8TH_DOWN = "note8thDown"
    NOTE8TH_UP = "note8thUp"
    NOTE_ABLACK = "noteABlack"
    NOTE_AFLAT_BLACK = "noteAFlatBlack"
    NOTE_AFLAT_HALF = "noteAFlatHalf"
    NOTE_AFLAT_WHOLE = "noteAFlatWhole"
    NOTE_AHALF = "noteAHalf"
    NOTE_ASHARP_BLACK = "noteASharpBlack"
    NOTE_ASHARP_HALF = "noteASharpHalf"
    NOTE_ASHARP_WHOLE = "noteASharpWhole"
    NOTE_AWHOLE = "noteAWhole"
    NOTE_BBLACK = "noteBBlack"
    NOTE_BFLAT_BLACK = "noteBFlatBlack"
    NOTE_BFLAT_HALF = "noteBFlatHalf"
    NOTE_BFLAT_WHOLE = "noteBFlatWhole"
    NOTE_BHALF = "noteBHalf"
    NOTE_BSHARP_BLACK = "noteBSharpBlack"
    NOTE_BSHARP_HALF = "noteBSharpHalf"
    NOTE_BSHARP_WHOLE = "noteBSharpWhole"
    NOTE_BWHOLE = "noteBWhole"
    NOTE_CBLACK = "noteCBlack"
    NOTE_CFLAT_BLACK = "noteCFlatBlack"
    NOTE_CFLAT_HALF = "noteCFlatHalf"
    NOTE_CFLAT_WHOLE = "noteCFlatWhole"
    NOTE_CHALF = "noteCHalf"
    NOTE_CSHARP_BLACK = "noteCSharpBlack"
    NOTE_CSHARP_HALF = "noteCSharpHalf"
    NOTE_CSHARP_WHOLE = "noteCSharpWhole"
    NOTE_CWHOLE = "noteCWhole"
    NOTE_DBLACK = "noteDBlack"
    NOTE_DFLAT_BLACK = "noteDFlatBlack"
    NOTE_DFLAT_HALF = "noteDFlatHalf"
    NOTE_DFLAT_WHOLE = "noteDFlatWhole"
    NOTE_DHALF = "noteDHalf"
    NOTE_DSHARP_BLACK = "noteDSharpBlack"
    NOTE_DSHARP_HALF = "noteDSharpHalf"
    NOTE_DSHARP_WHOLE = "noteDSharpWhole"
    NOTE_DWHOLE = "noteDWhole"
    NOTE_DO_BLACK = "noteDoBlack"
    NOTE_DO_HALF = "noteDoHalf"
    NOTE_DO_WHOLE = "noteDoWhole"
    NOTE_DOUBLE_WHOLE = "noteDoubleWhole"
    NOTE_DOUBLE_WHOLE_SQUARE = "noteDoubleWholeSquare"
    NOTE_EBLACK = "noteEBlack"
    NOTE_EFLAT_BLACK = "noteEFlatBlack"
    NOTE_EFLAT_HALF = "noteEFlatHalf"
    NOTE_EFLAT_WHOLE = "noteEFlatWhole"
    NOTE_EHALF = "noteEHalf"
    NOTE_ESHARP_BLACK = "noteESharpBlack"
    NOTE_ESHARP_HALF = "noteESharpHalf"
    NOTE_ESHARP_WHOLE = "noteESharpWhole"
    NOTE_EWHOLE = "noteEWhole"
    NOTE_EMPTY_BLACK = "noteEmptyBlack"
    NOTE_EMPTY_HALF = "noteEmptyHalf"
    NOTE_EMPTY_WHOLE = "noteEmptyWhole"
    NOTE_FBLACK = "noteFBlack"
    NOTE_FFLAT_BLACK = "noteFFlatBlack"
    NOTE_FFLAT_HALF = "noteFFlatHalf"
    NOTE_FFLAT_WHOLE = "noteFFlatWhole"
    NOTE_FHALF = "noteFHalf"
    NOTE_FSHARP_BLACK = "noteFSharpBlack"
    NOTE_FSHARP_HALF = "noteFSharpHalf"
    NOTE_FSHARP_WHOLE = "noteFSharpWhole"
    NOTE_FWHOLE = "noteFWhole"
    NOTE_FA_BLACK = "noteFaBlack"
    NOTE_FA_HALF = "noteFaHalf"
    NOTE_FA_WHOLE = "noteFaWhole"
    NOTE_GBLACK = "noteGBlack"
    NOTE_GFLAT_BLACK = "noteGFlatBlack"
    NOTE_GFLAT_HALF = "noteGFlatHalf"
    NOTE_GFLAT_WHOLE = "noteGFlatWhole"
    NOTE_GHALF = "noteGHalf"
    NOTE_GSHARP_BLACK = "noteGSharpBlack"
    NOTE_GSHARP_HALF = "noteGSharpHalf"
    NOTE_GSHARP_WHOLE = "noteGSharpWhole"
    NOTE_GWHOLE = "noteGWhole"
    NOTE_HBLACK = "noteHBlack"
    NOTE_HHALF = "noteHHalf"
    NOTE_HSHARP_BLACK = "noteHSharpBlack"
    NOTE_HSHARP_HALF = "noteHSharpHalf"
    NOTE_HSHARP_WHOLE = "noteHSharpWhole"
    NOTE_HWHOLE = "noteHWhole"
    NOTE_HALF_DOWN = "noteHalfDown"
    NOTE_HALF_UP = "noteHalfUp"
    NOTE_LA_BLACK = "noteLaBlack"
    NOTE_LA_HALF = "noteLaHalf"
    NOTE_LA_WHOLE = "noteLaWhole"
    NOTE_MI_BLACK = "noteMiBlack"
    NOTE_MI_HALF = "noteMiHalf"
    NOTE_MI_WHOLE = "noteMiWhole"
    NOTE_QUARTER_DOWN = "noteQuarterDown"
    NOTE_QUARTER_UP = "noteQuarterUp"
    NOTE_RE_BLACK = "noteReBlack"
    NOTE_RE_HALF = "noteReHalf"
    NOTE_RE_WHOLE = "noteReWhole"
    NOTE_SHAPE_ARROWHEAD_LEFT_BLACK = "noteShapeArrowheadLeftBlack"
    NOTE_SHAPE_ARROWHEAD_LEFT_WHITE = "noteShapeArrowheadLeftWhite"
    NOTE_SHAPE_DIAMOND_BLACK = "noteShapeDiamondBlack"
    NOTE_SHAPE_DIAMOND_WHITE = "noteShapeDiamondWhite"
    NOTE_SHAPE_ISOSCELES_TRIANGLE_BLACK = "noteShapeIsoscelesTriangleBlack"
    NOTE_SHAPE_ISOSCELES_TRIANGLE_WHITE = "noteShapeIsoscelesTriangleWhite"
    NOTE_SHAPE_KEYSTONE_BLACK = "noteShapeKeystoneBlack"
    NOTE_SHAPE_KEYSTONE_WHITE = "noteShapeKeystoneWhite"
    NOTE_SHAPE_MOON_BLACK = "noteShapeMoonBlack"
    NOTE_SHAPE_MOON_LEFT_BLACK = "noteShapeMoonLeftBlack"
    NOTE_SHAPE_MOON_LEFT_WHITE = "noteShapeMoonLeftWhite"
    NOTE_SHAPE_MOON_WHITE = "noteShapeMoonWhite"
    NOTE_SHAPE_QUARTER_MOON_BLACK = "noteShapeQuarterMoonBlack"
    NOTE_SHAPE_QUARTER_MOON_WHITE = "noteShapeQuarterMoonWhite"
    NOTE_SHAPE_ROUND_BLACK = "noteShapeRoundBlack"
    NOTE_SHAPE_ROUND_WHITE = "noteShapeRoundWhite"
    NOTE_SHAPE_SQUARE_BLACK = "noteShapeSquareBlack"
    NOTE_SHAPE_SQUARE_WHITE = "noteShapeSquareWhite"
    NOTE_SHAPE_TRIANGLE_LEFT_BLACK = "noteShapeTriangleLeftBlack"
    NOTE_SHAPE_TRIANGLE_LEFT_WHITE = "noteShapeTriangleLeftWhite"
    NOTE_SHAPE_TRIANGLE_RIGHT_BLACK = "noteShapeTriangleRightBlack"
    NOTE_SHAPE_TRIANGLE_RIGHT_WHITE = "noteShapeTriangleRightWhite"
    NOTE_SHAPE_TRIANGLE_ROUND_BLACK = "noteShapeTriangleRoundBlack"
    NOTE_SHAPE_TRIANGLE_ROUND_LEFT_BLACK = "noteShapeTriangleRoundLeftBlack"
    NOTE_SHAPE_TRIANGLE_ROUND_LEFT_WHITE = "noteShapeTriangleRoundLeftWhite"
    NOTE_SHAPE_TRIANGLE_ROUND_WHITE = "noteShapeTriangleRoundWhite"
    NOTE_SHAPE_TRIANGLE_UP_BLACK = "noteShapeTriangleUpBlack"
    NOTE_SHAPE_TRIANGLE_UP_WHITE = "noteShapeTriangleUpWhite"
    NOTE_SI_BLACK = "noteSiBlack"
    NOTE_SI_HALF = "noteSiHalf"
    NOTE_SI_WHOLE = "noteSiWhole"
    NOTE_SO_BLACK = "noteSoBlack"
    NOTE_SO_HALF = "noteSoHalf"
    NOTE_SO_WHOLE = "noteSoWhole"
    NOTE_TI_BLACK = "noteTiBlack"
    NOTE_TI_HALF = "noteTiHalf"
    NOTE_TI_WHOLE = "noteTiWhole"
    NOTE_WHOLE = "noteWhole"
    NOTEHEAD_BLACK = "noteheadBlack"
    NOTEHEAD_BLACK_PARENS = "noteheadBlackParens"
    NOTEHEAD_CIRCLE_SLASH = "noteheadCircleSlash"
    NOTEHEAD_CIRCLE_X = "noteheadCircleX"
    NOTEHEAD_CIRCLE_XDOUBLE_WHOLE = "noteheadCircleXDoubleWhole"
    NOTEHEAD_CIRCLE_XHALF = "noteheadCircleXHalf"
    NOTEHEAD_CIRCLE_XWHOLE = "noteheadCircleXWhole"
    NOTEHEAD_CIRCLED_BLACK = "noteheadCircledBlack"
    NOTEHEAD_CIRCLED_BLACK_LARGE = "noteheadCircledBlackLarge"
    NOTEHEAD_CIRCLED_DOUBLE_WHOLE = "noteheadCircledDoubleWhole"
    NOTEHEAD_CIRCLED_DOUBLE_WHOLE_LARGE = "noteheadCircledDoubleWholeLarge"
    NOTEHEAD_CIRCLED_HALF = "noteheadCircledHalf"
    NOTEHEAD_CIRCLED_HALF_LARGE = "noteheadCircledHalfLarge"
    NOTEHEAD_CIRCLED_WHOLE = "noteheadCircledWhole"
    NOTEHEAD_CIRCLED_WHOLE_LARGE = "noteheadCircledWholeLarge"
    NOTEHEAD_CIRCLED_XLARGE = "noteheadCircledXLarge"
    NOTEHEAD_CLUSTER_DOUBLE_WHOLE2ND = "noteheadClusterDoubleWhole2nd"
    NOTEHEAD_CLUSTER_DOUBLE_WHOLE3RD = "noteheadClusterDoubleWhole3rd"
    NOTEHEAD_CLUSTER_DOUBLE_WHOLE_BOTTOM = "noteheadClusterDoubleWholeBottom"
    NOTEHEAD_CLUSTER_DOUBLE_WHOLE_MIDDLE = "noteheadClusterDoubleWholeMiddle"
    NOTEHEAD_CLUSTER_DOUBLE_WHOLE_TOP = "noteheadClusterDoubleWholeTop"
    NOTEHEAD_CLUSTER_HALF2ND = "noteheadClusterHalf2nd"
    NOTEHEAD_CLUSTER_HALF3RD = "noteheadClusterHalf3rd"
    NOTEHEAD_CLUSTER_HALF_BOTTOM = "noteheadClusterHalfBottom"
    NOTEHEAD_CLUSTER_HALF_MIDDLE = "noteheadClusterHalfMiddle"
    NOTEHEAD_CLUSTER_HALF_TOP = "noteheadClusterHalfTop"
    NOTEHEAD_CLUSTER_QUARTER2ND = "noteheadClusterQuarter2nd"
    NOTEHEAD_CLUSTER_QUARTER3RD = "noteheadClusterQuarter3rd"
    NOTEHEAD_CLUSTER_QUARTER_BOTTOM = "noteheadClusterQuarterBottom"
    NOTEHEAD_CLUSTER_QUARTER_MIDDLE = "noteheadClusterQuarterMiddle"
    NOTEHEAD_CLUSTER_QUARTER_TOP = "noteheadClusterQuarterTop"
    NOTEHEAD_CLUSTER_ROUND_BLACK = "noteheadClusterRoundBlack"
    NOTEHEAD_CLUSTER_ROUND_WHITE = "noteheadClusterRoundWhite"
    NOTEHEAD_CLUSTER_SQUARE_BLACK = "noteheadClusterSquareBlack"
    NOTEHEAD_CLUSTER_SQUARE_WHITE = "noteheadClusterSquareWhite"
    NOTEHEAD_CLUSTER_WHOLE2ND = "noteheadClusterWhole2nd"
    NOTEHEAD_CLUSTER_WHOLE3RD = "noteheadClusterWhole3rd"
    NOTEHEAD_CLUSTER_WHOLE_BOTTOM = "noteheadClusterWholeBottom"
    NOTEHEAD_CLUSTER_WHOLE_MIDDLE = "noteheadClusterWholeMiddle"
    NOTEHEAD_CLUSTER_WHOLE_TOP = "noteheadClusterWholeTop"
    NOTEHEAD_COWELL_ELEVENTH_NOTE_SERIES_BLACK = "noteheadCowellEleventhNoteSeriesBlack"
    NOTEHEAD_COWELL_ELEVENTH_NOTE_SERIES_HALF = "noteheadCowellEleventhNoteSeriesHalf"
    NOTEHEAD_COWELL_ELEVENTH_NOTE_SERIES_WHOLE = "noteheadCowellEleventhNoteSeriesWhole"
    NOTEHEAD_COWELL_FIFTEENTH_NOTE_SERIES_BLACK = "noteheadCowellFifteenthNoteSeriesBlack"
    NOTEHEAD_COWELL_FIFTEENTH_NOTE_SERIES_HALF = "noteheadCowellFifteenthNoteSeriesHalf"
    NOTEHEAD_COWELL_FIFTEENTH_NOTE_SERIES_WHOLE = "noteheadCowellFifteenthNoteSeriesWhole"
    NOTEHEAD_COWELL_FIFTH_NOTE_SERIES_BLACK = "noteheadCowellFifthNoteSeriesBlack"
    NOTEHEAD_COWELL_FIFTH_NOTE_SERIES_HALF = "noteheadCowellFifthNoteSeriesHalf"
    NOTEHEAD_COWELL_FIFTH_NOTE_SERIES_WHOLE = "noteheadCowellFifthNoteSeriesWhole"
    NOTEHEAD_COWELL_NINTH_NOTE_SERIES_BLACK = "noteheadCowellNinthNoteSeriesBlack"
    NOTEHEAD_COWELL_NINTH_NOTE_SERIES_HALF = "noteheadCowellNinthNoteSeriesHalf"
    NOTEHEAD_COWELL_NINTH_NOTE_SERIES_WHOLE = "noteheadCowellNinthNoteSeriesWhole"
    NOTEHEAD_COWELL_SEVENTH_NOTE_SERIES_BLACK = "noteheadCowellSeventhNoteSeriesBlack"
    NOTEHEAD_COWELL_SEVENTH_NOTE_SERIES_HALF = "noteheadCowellSeventhNoteSeriesHalf"
    NOTEHEAD_COWELL_SEVENTH_NOTE_SERIES_WHOLE = "noteheadCowellSeventhNoteSeriesWhole"
    NOTEHEAD_COWELL_THIRD_NOTE_SERIES_BLACK = "noteheadCowellThirdNoteSeriesBlack"
    NOTEHEAD_COWELL_THIRD_NOTE_SERIES_HALF = "noteheadCowellThirdNoteSeriesHalf"
    NOTEHEAD_COWELL_THIRD_NOTE_SERIES_WHOLE = "noteheadCowellThirdNoteSeriesWhole"
    NOTEHEAD_COWELL_THIRTEENTH_NOTE_SERIES_BLACK = "noteheadCowellThirteenthNoteSeriesBlack"
    NOTEHEAD_COWELL_THIRTEENTH_NOTE_SERIES_HALF = "noteheadCowellThirteenthNoteSeriesHalf"
    NOTEHEAD_COWELL_THIRTEENTH_NOTE_SERIES_WHOLE = "noteheadCowellThirteenthNoteSeriesWhole"
    NOTEHEAD_DIAMOND_BLACK = "noteheadDiamondBlack"
    NOTEHEAD_DIAMOND_BLACK_OLD = "noteheadDiamondBlackOld"
    NOTEHEAD_DIAMOND_BLACK_WIDE = "noteheadDiamondBlackWide"
    NOTEHEAD_DIAMOND_CLUSTER_BLACK2ND = "noteheadDiamondClusterBlack2nd"
    NOTEHEAD_DIAMOND_CLUSTER_BLACK3RD = "noteheadDiamondClusterBlack3rd"
    NOTEHEAD_DIAMOND_CLUSTER_BLACK_BOTTOM = "noteheadDiamondClusterBlackBottom"
    NOTEHEAD_DIAMOND_CLUSTER_BLACK_MIDDLE = "noteheadDiamondClusterBlackMiddle"
    NOTEHEAD_DIAMOND_CLUSTER_BLACK_TOP = "noteheadDiamondClusterBlackTop"
    NOTEHEAD_DIAMOND_CLUSTER_WHITE2ND = "noteheadDiamondClusterWhite2nd"
    NOTEHEAD_DIAMOND_CLUSTER_WHITE3RD = "noteheadDiamondClusterWhite3rd"
    NOTEHEAD_DIAMOND_CLUSTER_WHITE_BOTTOM = "noteheadDiamondClusterWhiteBottom"
    NOTEHEAD_DIAMOND_CLUSTER_WHITE_MIDDLE = "noteheadDiamondClusterWhiteMiddle"
    NOTEHEAD_DIAMOND_CLUSTER_WHITE_TOP = "noteheadDiamondClusterWhiteTop"
    NOTEHEAD_DIAMOND_DOUBLE_WHOLE = "noteheadDiamondDoubleWhole"
    NOTEHEAD_DIAMOND_DOUBLE_WHOLE_OLD = "noteheadDiamondDoubleWholeOld"
    NOTEHEAD_DIAMOND_HALF = "noteheadDiamondHalf"
    NOTEHEAD_DIAMOND_HALF_FILLED = "noteheadDiamondHalfFilled"
    NOTEHEAD_DIAMOND_HALF_OLD = "noteheadDiamondHalfOld"
    NOTEHEAD_DIAMOND_HALF_WIDE = "noteheadDiamondHalfWide"
    NOTEHEAD_DIAMOND_OPEN = "noteheadDiamondOpen"
    NOTEHEAD_DIAMOND_WHITE = "noteheadDiamondWhite"
    NOTEHEAD_DIAMOND_WHITE_WIDE = "noteheadDiamondWhiteWide"
    NOTEHEAD_DIAMOND_WHOLE = "noteheadDiamondWhole"
    NOTEHEAD_DIAMOND_WHOLE_OLD = "noteheadDiamondWholeOld"
    NOTEHEAD_DOUBLE_WHOLE = "noteheadDoubleWhole"
    NOTEHEAD_DOUBLE_WHOLE_PARENS = "noteheadDoubleWholeParens"
    NOTEHEAD_DOUBLE_WHOLE_SQUARE = "noteheadDoubleWholeSquare"
    NOTEHEAD_DOUBLE_WHOLE_WITH_X = "noteheadDoubleWholeWithX"
    NOTEHEAD_HALF = "noteheadHalf"
    NOTEHEAD_HALF_FILLED = "noteheadHalfFilled"
    NOTEHEAD_HALF_PARENS = "noteheadHalfParens"
    NOTEHEAD_HALF_WITH_X = "noteheadHalfWithX"
    NOTEHEAD_HEAVY_X = "noteheadHeavyX"
    NOTEHEAD_HEAVY_XHAT = "noteheadHeavyXHat"
    NOTEHEAD_LARGE_ARROW_DOWN_BLACK = "noteheadLargeArrowDownBlack"
    NOTEHEAD_LARGE_ARROW_DOWN_DOUBLE_WHOLE = "noteheadLargeArrowDownDoubleWhole"
    NOTEHEAD_LARGE_ARROW_DOWN_HALF = "noteheadLargeArrowDownHalf"
    NOTEHEAD_LARGE_ARROW_DOWN_WHOLE = "noteheadLargeArrowDownWhole"
    NOTEHEAD_LARGE_ARROW_UP_BLACK = "noteheadLargeArrowUpBlack"
    NOTEHEAD_LARGE_ARROW_UP_DOUBLE_WHOLE = "noteheadLargeArrowUpDoubleWhole"
    NOTEHEAD_LARGE_ARROW_UP_HALF = "noteheadLargeArrowUpHalf"
    NOTEHEAD_LARGE_ARROW_UP_WHOLE = "noteheadLargeArrowUpWhole"
    NOTEHEAD_MOON_BLACK = "noteheadMoonBlack"
    NOTEHEAD_MOON_WHITE = "noteheadMoonWhite"
    NOTEHEAD_NULL = "noteheadNull"
    NOTEHEAD_PARENTHESIS = "noteheadParenthesis"
    NOTEHEAD_PARENTHESIS_LEFT = "noteheadParenthesisLeft"
    NOTEHEAD_PARENTHESIS_RIGHT = "noteheadParenthesisRight"
    NOTEHEAD_PLUS_BLACK = "noteheadPlusBlack"
    NOTEHEAD_PLUS_DOUBLE_WHOLE = "noteheadPlusDoubleWhole"
    NOTEHEAD_PLUS_HALF = "noteheadPlusHalf"
    NOTEHEAD_PLUS_WHOLE = "noteheadPlusWhole"
    NOTEHEAD_RECTANGULAR_CLUSTER_BLACK_BOTTOM = "noteheadRectangularClusterBlackBottom"
    NOTEHEAD_RECTANGULAR_CLUSTER_BLACK_MIDDLE = "noteheadRectangularClusterBlackMiddle"
    NOTEHEAD_RECTANGULAR_CLUSTER_BLACK_TOP = "noteheadRectangularClusterBlackTop"
    NOTEHEAD_RECTANGULAR_CLUSTER_WHITE_BOTTOM = "noteheadRectangularClusterWhiteBottom"
    NOTEHEAD_RECTANGULAR_CLUSTER_WHITE_MIDDLE = "noteheadRectangularClusterWhiteMiddle"
    NOTEHEAD_RECTANGULAR_CLUSTER_WHITE_TOP = "noteheadRectangularClusterWhiteTop"
    NOTEHEAD_ROUND_BLACK = "noteheadRoundBlack"
    NOTEHEAD_ROUND_BLACK_LARGE = "noteheadRoundBlackLarge"
    NOTEHEAD_ROUND_BLACK_SLASHED = "noteheadRoundBlackSlashed"
    NOTEHEAD_ROUND_BLACK_SLASHED_LARGE = "noteheadRoundBlackSlashedLarge"
    NOTEHEAD_ROUND_WHITE = "noteheadRoundWhite"
    NOTEHEAD_ROUND_WHITE_LARGE = "noteheadRoundWhiteLarge"
    NOTEHEAD_ROUND_WHITE_SLASHED = "noteheadRoundWhiteSlashed"
    NOTEHEAD_ROUND_WHITE_SLASHED_LARGE = "noteheadRoundWhiteSlashedLarge"
    NOTEHEAD_ROUND_WHITE_WITH_DOT = "noteheadRoundWhiteWithDot"
    NOTEHEAD_ROUND_WHITE_WITH_DOT_LARGE = "noteheadRoundWhiteWithDotLarge"
    NOTEHEAD_SLASH_DIAMOND_WHITE = "noteheadSlashDiamondWhite"
    NOTEHEAD_SLASH_HORIZONTAL_ENDS = "noteheadSlashHorizontalEnds"
    NOTEHEAD_SLASH_HORIZONTAL_ENDS_MUTED = "noteheadSlashHorizontalEndsMuted"
    NOTEHEAD_SLASH_VERTICAL_ENDS = "noteheadSlashVerticalEnds"
    NOTEHEAD_SLASH_VERTICAL_ENDS_MUTED = "noteheadSlashVerticalEndsMuted"
    NOTEHEAD_SLASH_VERTICAL_ENDS_SMALL = "noteheadSlashVerticalEndsSmall"
    NOTEHEAD_SLASH_WHITE_DOUBLE_WHOLE = "noteheadSlashWhiteDoubleWhole"
    NOTEHEAD_SLASH_WHITE_HALF = "noteheadSlashWhiteHalf"
    NOTEHEAD_SLASH_WHITE_MUTED = "noteheadSlashWhiteMuted"
    NOTEHEAD_SLASH_WHITE_WHOLE = "noteheadSlashWhiteWhole"
    NOTEHEAD_SLASH_X = "noteheadSlashX"
    NOTEHEAD_SLASHED_BLACK1 = "noteheadSlashedBlack1"
    NOTEHEAD_SLASHED_BLACK2 = "noteheadSlashedBlack2"
    NOTEHEAD_SLASHED_DOUBLE_WHOLE1 = "noteheadSlashedDoubleWhole1"
    NOTEHEAD_SLASHED_DOUBLE_WHOLE2 = "noteheadSlashedDoubleWhole2"
    NOTEHEAD_SLASHED_HALF1 = "noteheadSlashedHalf1"
    NOTEHEAD_SLASHED_HALF2 = "noteheadSlashedHalf2"
    NOTEHEAD_SLASHED_WHOLE1 = "noteheadSlashedWhole1"
    NOTEHEAD_SLASHED_WHOLE2 = "noteheadSlashedWhole2"
    NOTEHEAD_SQUARE_BLACK = "noteheadSquareBlack"
    NOTEHEAD_SQUARE_BLACK_LARGE = "noteheadSquareBlackLarge"
    NOTEHEAD_SQUARE_BLACK_WHITE = "noteheadSquareBlackWhite"
    NOTEHEAD_SQUARE_WHITE = "noteheadSquareWhite"
    NOTEHEAD_TRIANGLE_DOWN_BLACK = "noteheadTriangleDownBlack"
    NOTEHEAD_TRIANGLE_DOWN_DOUBLE_WHOLE = "noteheadTriangleDownDoubleWhole"
    NOTEHEAD_TRIANGLE_DOWN_HALF = "noteheadTriangleDownHalf"
    NOTEHEAD_TRIANGLE_DOWN_WHITE = "noteheadTriangleDownWhite"
    NOTEHEAD_TRIANGLE_DOWN_WHOLE = "noteheadTriangleDownWhole"
    NOTEHEAD_TRIANGLE_LEFT_BLACK = "noteheadTriangleLeftBlack"
    NOTEHEAD_TRIANGLE_LEFT_WHITE = "noteheadTriangleLeftWhite"
    NOTEHEAD_TRIANGLE_RIGHT_BLACK = "noteheadTriangleRightBlack"
    NOTEHEAD_TRIANGLE_RIGHT_WHITE = "noteheadTriangleRightWhite"
    NOTEHEAD_TRIANGLE_ROUND_DOWN_BLACK = "noteheadTriangleRoundDownBlack"
    NOTEHEAD_TRIANGLE_ROUND_DOWN_WHITE = "noteheadTriangleRoundDownWhite"
    NOTEHEAD_TRIANGLE_UP_BLACK = "noteheadTriangleUpBlack"
    NOTEHEAD_TRIANGLE_UP_DOUBLE_WHOLE = "noteheadTriangleUpDoubleWhole"
    NOTEHEAD_TRIANGLE_UP_HALF = "noteheadTriangleUpHalf"
    NOTEHEAD_TRIANGLE_UP_RIGHT_BLACK = "noteheadTriangleUpRightBlack"
    NOTEHEAD_TRIANGLE_UP_RIGHT_WHITE = "noteheadTriangleUpRightWhite"
    NOTEHEAD_TRIANGLE_UP_WHITE = "noteheadTriangleUpWhite"
    NOTEHEAD_TRIANGLE_UP_WHOLE = "noteheadTriangleUpWhole"
    NOTEHEAD_VOID_WITH_X = "noteheadVoidWithX"
    NOTEHEAD_WHOLE = "noteheadWhole"
    NOTEHEAD_WHOLE_FILLED = "noteheadWholeFilled"
    NOTEHEAD_WHOLE_PARENS = "noteheadWholeParens"
    NOTEHEAD_WHOLE_WITH_X = "noteheadWholeWithX"
    NOTEHEAD_XBLACK = "noteheadXBlack"
    NOTEHEAD_XDOUBLE_WHOLE = "noteheadXDoubleWhole"
    NOTEHEAD_XHALF = "noteheadXHalf"
    NOTEHEAD_XORNATE = "noteheadXOrnate"
    NOTEHEAD_XORNATE_ELLIPSE = "noteheadXOrnateEllipse"
    NOTEHEAD_XWHOLE = "noteheadXWhole"
    OCTAVE_BASELINE_A = "octaveBaselineA"
    OCTAVE_BASELINE_B = "octaveBaselineB"
    OCTAVE_BASELINE_M = "octaveBaselineM"
    OCTAVE_BASELINE_V = "octaveBaselineV"
    OCTAVE_BASSA = "octaveBassa"
    OCTAVE_LOCO = "octaveLoco"
    OCTAVE_PARENS_LEFT = "octaveParensLeft"
    OCTAVE_PARENS_RIGHT = "octaveParensRight"
    OCTAVE_SUPERSCRIPT_A = "octaveSuperscriptA"
    OCTAVE_SUPERSCRIPT_B = "octaveSuperscriptB"
    OCTAVE_SUPERSCRIPT_M = "octaveSuperscriptM"
    OCTAVE_SUPERSCRIPT_V = "octaveSuperscriptV"
    ORNAMENT_BOTTOM_LEFT_CONCAVE_STROKE = "ornamentBottomLeftConcaveStroke"
    ORNAMENT_BOTTOM_LEFT_CONCAVE_STROKE_LARGE = "ornamentBottomLeftConcaveStrokeLarge"
    ORNAMENT_BOTTOM_LEFT_CONVEX_STROKE = "ornamentBottomLeftConvexStroke"
    ORNAMENT_BOTTOM_RIGHT_CONCAVE_STROKE = "ornamentBottomRightConcaveStroke"
    ORNAMENT_BOTTOM_RIGHT_CONVEX_STROKE = "ornamentBottomRightConvexStroke"
    ORNAMENT_COMMA = "ornamentComma"
    ORNAMENT_DOUBLE_OBLIQUE_LINES_AFTER_NOTE = "ornamentDoubleObliqueLinesAfterNote"
    ORNAMENT_DOUBLE_OBLIQUE_LINES_BEFORE_NOTE = "ornamentDoubleObliqueLinesBeforeNote"
    ORNAMENT_DOWN_MORDENT = "ornamentDownMordent"
    ORNAMENT_HAYDN = "ornamentHaydn"
    ORNAMENT_HIGH_LEFT_CONCAVE_STROKE = "ornamentHighLeftConcaveStroke"
    ORNAMENT_HIGH_LEFT_CONVEX_STROKE = "ornamentHighLeftConvexStroke"
    ORNAMENT_HIGH_RIGHT_CONCAVE_STROKE = "ornamentHighRightConcaveStroke"
    ORNAMENT_HIGH_RIGHT_CONVEX_STROKE = "ornamentHighRightConvexStroke"
    ORNAMENT_LEFT_FACING_HALF_CIRCLE = "ornamentLeftFacingHalfCircle"
    ORNAMENT_LEFT_FACING_HOOK = "ornamentLeftFacingHook"
    ORNAMENT_LEFT_PLUS = "ornamentLeftPlus"
    ORNAMENT_LEFT_SHAKE_T = "ornamentLeftShakeT"
    ORNAMENT_LEFT_VERTICAL_STROKE = "ornamentLeftVerticalStroke"
    ORNAMENT_LEFT_VERTICAL_STROKE_WITH_CROSS = "ornamentLeftVerticalStrokeWithCross"
    ORNAMENT_LINE_PRALL = "ornamentLinePrall"
    ORNAMENT_LOW_LEFT_CONCAVE_STROKE = "ornamentLowLeftConcaveStroke"
    ORNAMENT_LOW_LEFT_CONVEX_STROKE = "ornamentLowLeftConvexStroke"
    ORNAMENT_LOW_RIGHT_CONCAVE_STROKE = "ornamentLowRightConcaveStroke"
    ORNAMENT_LOW_RIGHT_CONVEX_STROKE = "ornamentLowRightConvexStroke"
    ORNAMENT_MIDDLE_VERTICAL_STROKE = "ornamentMiddleVerticalStroke"
    ORNAMENT_MORDENT = "ornamentMordent"
    ORNAMENT_OBLIQUE_LINE_AFTER_NOTE = "ornamentObliqueLineAfterNote"
    ORNAMENT_OBLIQUE_LINE_BEFORE_NOTE = "ornamentObliqueLineBeforeNote"
    ORNAMENT_OBLIQUE_LINE_HORIZ_AFTER_NOTE = "ornamentObliqueLineHorizAfterNote"
    ORNAMENT_OBLIQUE_LINE_HORIZ_BEFORE_NOTE = "ornamentObliqueLineHorizBeforeNote"
    ORNAMENT_ORISCUS = "ornamentOriscus"
    ORNAMENT_PINCE_COUPERIN = "ornamentPinceCouperin"
    ORNAMENT_PRALL_DOWN = "ornamentPrallDown"
    ORNAMENT_PRALL_MORDENT = "ornamentPrallMordent"
    ORNAMENT_PRALL_UP = "ornamentPrallUp"
    ORNAMENT_PRECOMP_APPOGG_TRILL = "ornamentPrecompAppoggTrill"
    ORNAMENT_PRECOMP_APPOGG_TRILL_SUFFIX = "ornamentPrecompAppoggTrillSuffix"
    ORNAMENT_PRECOMP_CADENCE = "ornamentPrecompCadence"
    ORNAMENT_PRECOMP_CADENCE_UPPER_PREFIX = "ornamentPrecompCadenceUpperPrefix"
    ORNAMENT_PRECOMP_CADENCE_UPPER_PREFIX_TURN = "ornamentPrecompCadenceUpperPrefixTurn"
    ORNAMENT_PRECOMP_CADENCE_WITH_TURN = "ornamentPrecompCadenceWithTurn"
    ORNAMENT_PRECOMP_DOUBLE_CADENCE_LOWER_PREFIX = "ornamentPrecompDoubleCadenceLowerPrefix"
    ORNAMENT_PRECOMP_DOUBLE_CADENCE_UPPER_PREFIX = "ornamentPrecompDoubleCadenceUpperPrefix"
    ORNAMENT_PRECOMP_DOUBLE_CADENCE_UPPER_PREFIX_TURN = "ornamentPrecompDoubleCadenceUpperPrefixTurn"
    ORNAMENT_PRECOMP_INVERTED_MORDENT_UPPER_PREFIX = "ornamentPrecompInvertedMordentUpperPrefix"
    ORNAMENT_PRECOMP_MORDENT_RELEASE = "ornamentPrecompMordentRelease"
    ORNAMENT_PRECOMP_MORDENT_UPPER_PREFIX = "ornamentPrecompMordentUpperPrefix"
    ORNAMENT_PRECOMP_PORT_DE_VOIX_MORDENT = "ornamentPrecompPortDeVoixMordent"
    ORNAMENT_PRECOMP_SLIDE = "ornamentPrecompSlide"
    ORNAMENT_PRECOMP_SLIDE_TRILL_BACH = "ornamentPrecompSlideTrillBach"
    ORNAMENT_PRECOMP_SLIDE_TRILL_DANGLEBERT = "ornamentPrecompSlideTrillDAnglebert"
    ORNAMENT_PRECOMP_SLIDE_TRILL_MARPURG = "ornamentPrecompSlideTrillMarpurg"
    ORNAMENT_PRECOMP_SLIDE_TRILL_MUFFAT = "ornamentPrecompSlideTrillMuffat"
    ORNAMENT_PRECOMP_SLIDE_TRILL_SUFFIX_MUFFAT = "ornamentPrecompSlideTrillSuffixMuffat"
    ORNAMENT_PRECOMP_TRILL_LOWER_SUFFIX = "ornamentPrecompTrillLowerSuffix"
    ORNAMENT_PRECOMP_TRILL_SUFFIX_DANDRIEU = "ornamentPrecompTrillSuffixDandrieu"
    ORNAMENT_PRECOMP_TRILL_WITH_MORDENT = "ornamentPrecompTrillWithMordent"
    ORNAMENT_PRECOMP_TURN_TRILL_BACH = "ornamentPrecompTurnTrillBach"
    ORNAMENT_PRECOMP_TURN_TRILL_DANGLEBERT = "ornamentPrecompTurnTrillDAnglebert"
    ORNAMENT_QUILISMA = "ornamentQuilisma"
    ORNAMENT_RIGHT_FACING_HALF_CIRCLE = "ornamentRightFacingHalfCircle"
    ORNAMENT_RIGHT_FACING_HOOK = "ornamentRightFacingHook"
    ORNAMENT_RIGHT_VERTICAL_STROKE = "ornamentRightVerticalStroke"
    ORNAMENT_SCHLEIFER = "ornamentSchleifer"
    ORNAMENT_SHAKE3 = "ornamentShake3"
    ORNAMENT_SHAKE_MUFFAT1 = "ornamentShakeMuffat1"
    ORNAMENT_SHORT_OBLIQUE_LINE_AFTER_NOTE = "ornamentShortObliqueLineAfterNote"
    ORNAMENT_SHORT_OBLIQUE_LINE_BEFORE_NOTE = "ornamentShortObliqueLineBeforeNote"
    ORNAMENT_SHORT_TRILL = "ornamentShortTrill"
    ORNAMENT_TOP_LEFT_CONCAVE_STROKE = "ornamentTopLeftConcaveStroke"
    ORNAMENT_TOP_LEFT_CONVEX_STROKE = "ornamentTopLeftConvexStroke"
    ORNAMENT_TOP_RIGHT_CONCAVE_STROKE = "ornamentTopRightConcaveStroke"
    ORNAMENT_TOP_RIGHT_CONVEX_STROKE = "ornamentTopRightConvexStroke"
    ORNAMENT_TREMBLEMENT = "ornamentTremblement"
    ORNAMENT_TREMBLEMENT_COUPERIN = "ornamentTremblementCouperin"
    ORNAMENT_TRILL = "ornamentTrill"
    ORNAMENT_TURN = "ornamentTurn"
    ORNAMENT_TURN_INVERTED = "ornamentTurnInverted"
    ORNAMENT_TURN_SLASH = "ornamentTurnSlash"
    ORNAMENT_TURN_UP = "ornamentTurnUp"
    ORNAMENT_TURN_UP_S = "ornamentTurnUpS"
    ORNAMENT_UP_MORDENT = "ornamentUpMordent"
    ORNAMENT_UP_PRALL = "ornamentUpPrall"
    ORNAMENT_VERTICAL_LINE = "ornamentVerticalLine"
    ORNAMENT_ZIG_ZAG_LINE_NO_RIGHT_END = "ornamentZigZagLineNoRightEnd"
    ORNAMENT_ZIG_ZAG_LINE_WITH_RIGHT_END = "ornamentZigZagLineWithRightEnd"
    OTTAVA = "ottava"
    OTTAVA_ALTA = "ottavaAlta"
    OTTAVA_BASSA = "ottavaBassa"
    OTTAVA_BASSA_BA = "ottavaBassaBa"
    OTTAVA_BASSA_VB = "ottavaBassaVb"
    PENDERECKI_TREMOLO = "pendereckiTremolo"
    PICT_AGOGO = "pictAgogo"
    PICT_ALMGLOCKEN = "pictAlmglocken"
    PICT_ANVIL = "pictAnvil"
    PICT_BAMBOO_CHIMES = "pictBambooChimes"
    PICT_BAMBOO_SCRAPER = "pictBambooScraper"
    PICT_BAMBOO_TUBE_CHIMES = "pictBambooTubeChimes"
    PICT_BASS_DRUM = "pictBassDrum"
    PICT_BASS_DRUM_ON_SIDE = "pictBassDrumOnSide"
    PICT_BEATER_BOW = "pictBeaterBow"
    PICT_BEATER_BOX = "pictBeaterBox"
    PICT_BEATER_BRASS_MALLETS_DOWN = "pictBeaterBrassMalletsDown"
    PICT_BEATER_BRASS_MALLETS_UP = "pictBeaterBrassMalletsUp"
    PICT_BEATER_COMBINING_DASHED_CIRCLE = "pictBeaterCombiningDashedCircle"
    PICT_BEATER_COMBINING_PARENTHESES = "pictBeaterCombiningParentheses"
    PICT_BEATER_DOUBLE_BASS_DRUM_DOWN = "pictBeaterDoubleBassDrumDown"
    PICT_BEATER_DOUBLE_BASS_DRUM_UP = "pictBeaterDoubleBassDrumUp"
    PICT_BEATER_FINGER = "pictBeaterFinger"
    PICT_BEATER_FINGERNAILS = "pictBeaterFingernails"
    PICT_BEATER_FIST = "pictBeaterFist"
    PICT_BEATER_GUIRO_SCRAPER = "pictBeaterGuiroScraper"
    PICT_BEATER_HAMMER_METAL_DOWN = "pictBeaterHammerMetalDown"
    PICT_BEATER_HAMMER_METAL_UP = "pictBeaterHammerMetalUp"
    PICT_BEATER_HAMMER_PLASTIC_DOWN = "pictBeaterHammerPlasticDown"
    PICT_BEATER_HAMMER_PLASTIC_UP = "pictBeaterHammerPlasticUp"
    PICT_BEATER_HAMMER_WOOD_DOWN = "pictBeaterHammerWoodDown"
    PICT_BEATER_HAMMER_WOOD_UP = "pictBeaterHammerWoodUp"
    PICT_BEATER_HAND = "pictBeaterHand"
    PICT_BEATER_HARD_BASS_DRUM_DOWN = "pictBeaterHardBassDrumDown"
    PICT_BEATER_HARD_BASS_DRUM_UP = "pictBeaterHardBassDrumUp"
    PICT_BEATER_HARD_GLOCKENSPIEL_DOWN = "pictBeaterHardGlockenspielDown"
    PICT_BEATER_HARD_GLOCKENSPIEL_LEFT = "pictBeaterHardGlockenspielLeft"
    PICT_BEATER_HARD_GLOCKENSPIEL_RIGHT = "pictBeaterHardGlockenspielRight"
    PICT_BEATER_HARD_GLOCKENSPIEL_UP = "pictBeaterHardGlockenspielUp"
    PICT_BEATER_HARD_TIMPANI_DOWN = "pictBeaterHardTimpaniDown"
    PICT_BEATER_HARD_TIMPANI_LEFT = "pictBeaterHardTimpaniLeft"
    PICT_BEATER_HARD_TIMPANI_RIGHT = "pictBeaterHardTimpaniRight"
    PICT_BEATER_HARD_TIMPANI_UP = "pictBeaterHardTimpaniUp"
    PICT_BEATER_HARD_XYLOPHONE_DOWN = "pictBeaterHardXylophoneDown"
    PICT_BEATER_HARD_XYLOPHONE_LEFT = "pictBeaterHardXylophoneLeft"
    PICT_BEATER_HARD_XYLOPHONE_RIGHT = "pictBeaterHardXylophoneRight"
    PICT_BEATER_HARD_XYLOPHONE_UP = "pictBeaterHardXylophoneUp"
    PICT_BEATER_HARD_YARN_DOWN = "pictBeaterHardYarnDown"
    PICT_BEATER_HARD_YARN_LEFT = "pictBeaterHardYarnLeft"
    PICT_BEATER_HARD_YARN_RIGHT = "pictBeaterHardYarnRight"
    PICT_BEATER_HARD_YARN_UP = "pictBeaterHardYarnUp"
    PICT_BEATER_JAZZ_STICKS_DOWN = "pictBeaterJazzSticksDown"
    PICT_BEATER_JAZZ_STICKS_UP = "pictBeaterJazzSticksUp"
    PICT_BEATER_KNITTING_NEEDLE = "pictBeaterKnittingNeedle"
    PICT_BEATER_MEDIUM_BASS_DRUM_DOWN = "pictBeaterMediumBassDrumDown"
    PICT_BEATER_MEDIUM_BASS_DRUM_UP = "pictBeaterMediumBassDrumUp"
    PICT_BEATER_MEDIUM_TIMPANI_DOWN = "pictBeaterMediumTimpaniDown"
    PICT_BEATER_MEDIUM_TIMPANI_LEFT = "pictBeaterMediumTimpaniLeft"
    PICT_BEATER_MEDIUM_TIMPANI_RIGHT = "pictBeaterMediumTimpaniRight"
    PICT_BEATER_MEDIUM_TIMPANI_UP = "pictBeaterMediumTimpaniUp"
    PICT_BEATER_MEDIUM_XYLOPHONE_DOWN = "pictBeaterMediumXylophoneDown"
    PICT_BEATER_MEDIUM_XYLOPHONE_LEFT = "pictBeaterMediumXylophoneLeft"
    PICT_BEATER_MEDIUM_XYLOPHONE_RIGHT = "pictBeaterMediumXylophoneRight"
    PICT_BEATER_MEDIUM_XYLOPHONE_UP = "pictBeaterMediumXylophoneUp"
    PICT_BEATER_MEDIUM_YARN_DOWN = "pictBeaterMediumYarnDown"
    PICT_BEATER_MEDIUM_YARN_LEFT = "pictBeaterMediumYarnLeft"
    PICT_BEATER_MEDIUM_YARN_RIGHT = "pictBeaterMediumYarnRight"
    PICT_BEATER_MEDIUM_YARN_UP = "pictBeaterMediumYarnUp"
    PICT_BEATER_METAL_BASS_DRUM_DOWN = "pictBeaterMetalBassDrumDown"
    PICT_BEATER_METAL_BASS_DRUM_UP = "pictBeaterMetalBassDrumUp"
    PICT_BEATER_METAL_DOWN = "pictBeaterMetalDown"
    PICT_BEATER_METAL_HAMMER = "pictBeaterMetalHammer"
    PICT_BEATER_METAL_LEFT = "pictBeaterMetalLeft"
    PICT_BEATER_METAL_RIGHT = "pictBeaterMetalRight"
    PICT_BEATER_METAL_UP = "pictBeaterMetalUp"
    PICT_BEATER_SNARE_STICKS_DOWN = "pictBeaterSnareSticksDown"
    PICT_BEATER_SNARE_STICKS_UP = "pictBeaterSnareSticksUp"
    PICT_BEATER_SOFT_BASS_DRUM_DOWN = "pictBeaterSoftBassDrumDown"
    PICT_BEATER_SOFT_BASS_DRUM_UP = "pictBeaterSoftBassDrumUp"
    PICT_BEATER_SOFT_GLOCKENSPIEL_DOWN = "pictBeaterSoftGlockenspielDown"
    PICT_BEATER_SOFT_GLOCKENSPIEL_LEFT = "pictBeaterSoftGlockenspielLeft"
    PICT_BEATER_SOFT_GLOCKENSPIEL_RIGHT = "pictBeaterSoftGlockenspielRight"
    PICT_BEATER_SOFT_GLOCKENSPIEL_UP = "pictBeaterSoftGlockenspielUp"
    PICT_BEATER_SOFT_TIMPANI_DOWN = "pictBeaterSoftTimpaniDown"
    PICT_BEATER_SOFT_TIMPANI_LEFT = "pictBeaterSoftTimpaniLeft"
    PICT_BEATER_SOFT_TIMPANI_RIGHT = "pictBeaterSoftTimpaniRight"
    PICT_BEATER_SOFT_TIMPANI_UP = "pictBeaterSoftTimpaniUp"
    PICT_BEATER_SOFT_XYLOPHONE_DOWN = "pictBeaterSoftXylophoneDown"
    PICT_BEATER_SOFT_XYLOPHONE_LEFT = "pictBeaterSoftXylophoneLeft"
    PICT_BEATER_SOFT_XYLOPHONE_RIGHT = "pictBeaterSoftXylophoneRight"
    PICT_BEATER_SOFT_XYLOPHONE_UP = "pictBeaterSoftXylophoneUp"
    PICT_BEATER_SOFT_YARN_DOWN = "pictBeaterSoftYarnDown"
    PICT_BEATER_SOFT_YARN_LEFT = "pictBeaterSoftYarnLeft"
    PICT_BEATER_SOFT_YARN_RIGHT = "pictBeaterSoftYarnRight"
    PICT_BEATER_SOFT_YARN_UP = "pictBeaterSoftYarnUp"
    PICT_BEATER_SPOON_WOODEN_MALLET = "pictBeaterSpoonWoodenMallet"
    PICT_BEATER_SUPERBALL_DOWN = "pictBeaterSuperballDown"
    PICT_BEATER_SUPERBALL_LEFT = "pictBeaterSuperballLeft"
    PICT_BEATER_SUPERBALL_RIGHT = "pictBeaterSuperballRight"
    PICT_BEATER_SUPERBALL_UP = "pictBeaterSuperballUp"
    PICT_BEATER_TRIANGLE_DOWN = "pictBeaterTriangleDown"
    PICT_BEATER_TRIANGLE_UP = "pictBeaterTriangleUp"
    PICT_BEATER_WIRE_BRUSHES_DOWN = "pictBeaterWireBrushesDown"
    PICT_BEATER_WIRE_BRUSHES_UP = "pictBeaterWireBrushesUp"
    PICT_BEATER_WOOD_TIMPANI_DOWN = "pictBeaterWoodTimpaniDown"
    PICT_BEATER_WOOD_TIMPANI_LEFT = "pictBeaterWoodTimpaniLeft"
    PICT_BEATER_WOOD_TIMPANI_RIGHT = "pictBeaterWoodTimpaniRight"
    PICT_BEATER_WOOD_TIMPANI_UP = "pictBeaterWoodTimpaniUp"
    PICT_BEATER_WOOD_XYLOPHONE_DOWN = "pictBeaterWoodXylophoneDown"
    PICT_BEATER_WOOD_XYLOPHONE_LEFT = "pictBeaterWoodXylophoneLeft"
    PICT_BEATER_WOOD_XYLOPHONE_RIGHT = "pictBeaterWoodXylophoneRight"
    PICT_BEATER_WOOD_XYLOPHONE_UP = "pictBeaterWoodXylophoneUp"
    PICT_BELL = "pictBell"
    PICT_BELL_OF_CYMBAL = "pictBellOfCymbal"
    PICT_BELL_PLATE = "pictBellPlate"
    PICT_BELL_TREE = "pictBellTree"
    PICT_BOARD_CLAPPER = "pictBoardClapper"
    PICT_BONGOS = "pictBongos"
    PICT_BRAKE_DRUM = "pictBrakeDrum"
    PICT_CABASA = "pictCabasa"
    PICT_CANNON = "pictCannon"
    PICT_CAR_HORN = "pictCarHorn"
    PICT_CASTANETS = "pictCastanets"
    PICT_CASTANETS_WITH_HANDLE = "pictCastanetsWithHandle"
    PICT_CENCERRO = "pictCencerro"
    PICT_CENTRE1 = "pictCentre1"
    PICT_CENTRE2 = "pictCentre2"
    PICT_CENTRE3 = "pictCentre3"
    PICT_CHIMES = "pictChimes"
    PICT_CHINESE_CYMBAL = "pictChineseCymbal"
    PICT_CHOKE_CYMBAL = "pictChokeCymbal"
    PICT_CLAVES = "pictClaves"
    PICT_CLOSED_RIM_SHOT = "pictClosedRimShot"
    PICT_COINS = "pictCoins"
    PICT_CONGA = "pictConga"
    PICT_COW_BELL = "pictCowBell"
    PICT_CROTALES = "pictCrotales"
    PICT_CRUSH_STEM = "pictCrushStem"
    PICT_CUICA = "pictCuica"
    PICT_CYMBAL = "pictCymbal"
    PICT_CYMBAL_TONGS = "pictCymbalTongs"
    PICT_DAMP1 = "pictDamp1"
    PICT_DAMP2 = "pictDamp2"
    PICT_DAMP3 = "pictDamp3"
    PICT_DAMP4 = "pictDamp4"
    PICT_DEAD_NOTE_STEM = "pictDeadNoteStem"
    PICT_DUCK_CALL = "pictDuckCall"
    PICT_EDGE_OF_CYMBAL = "pictEdgeOfCymbal"
    PICT_EMPTY_TRAP = "pictEmptyTrap"
    PICT_FINGER_CYMBALS = "pictFingerCymbals"
    PICT_FLEXATONE = "pictFlexatone"
    PICT_FOOTBALL_RATCHET = "pictFootballRatchet"
    PICT_GLASS_HARMONICA = "pictGlassHarmonica"
    PICT_GLASS_HARP = "pictGlassHarp"
    PICT_GLASS_PLATE_CHIMES = "pictGlassPlateChimes"
    PICT_GLASS_TUBE_CHIMES = "pictGlassTubeChimes"
    PICT_GLSP = "pictGlsp"
    PICT_GLSP_SMITH_BRINDLE = "pictGlspSmithBrindle"
    PICT_GOBLET_DRUM = "pictGobletDrum"
    PICT_GONG = "pictGong"
    PICT_GONG_WITH_BUTTON = "pictGongWithButton"
    PICT_GUIRO = "pictGuiro"
    PICT_GUM_HARD_DOWN = "pictGumHardDown"
    PICT_GUM_HARD_LEFT = "pictGumHardLeft"
    PICT_GUM_HARD_RIGHT = "pictGumHardRight"
    PICT_GUM_HARD_UP = "pictGumHardUp"
    PICT_GUM_MEDIUM_DOWN = "pictGumMediumDown"
    PICT_GUM_MEDIUM_LEFT = "pictGumMediumLeft"
    PICT_GUM_MEDIUM_RIGHT = "pictGumMediumRight"
    PICT_GUM_MEDIUM_UP = "pictGumMediumUp"
    PICT_GUM_SOFT_DOWN = "pictGumSoftDown"
    PICT_GUM_SOFT_LEFT = "pictGumSoftLeft"
    PICT_GUM_SOFT_RIGHT = "pictGumSoftRight"
    PICT_GUM_SOFT_UP = "pictGumSoftUp"
    PICT_HALF_OPEN1 = "pictHalfOpen1"
    PICT_HALF_OPEN2 = "pictHalfOpen2"
    PICT_HANDBELL = "pictHandbell"
    PICT_HI_HAT = "pictHiHat"
    PICT_HI_HAT_ON_STAND = "pictHiHatOnStand"
    PICT_JAW_HARP = "pictJawHarp"
    PICT_KLAXON_HORN = "pictKlaxonHorn"
    PICT_LEFT_HAND_CIRCLE = "pictLeftHandCircle"
    PICT_LIONS_ROAR = "pictLionsRoar"
    PICT_LITHOPHONE = "pictLithophone"
    PICT_LOG_DRUM = "pictLogDrum"
    PICT_LOTUS_FLUTE = "pictLotusFlute"
    PICT_MAR = "pictMar"
    PICT_MAR_SMITH_BRINDLE = "pictMarSmithBrindle"
    PICT_MARACA = "pictMaraca"
    PICT_MARACAS = "pictMaracas"
    PICT_MEGAPHONE = "pictMegaphone"
    PICT_METAL_PLATE_CHIMES = "pictMetalPlateChimes"
    PICT_METAL_TUBE_CHIMES = "pictMetalTubeChimes"
    PICT_MUSICAL_SAW = "pictMusicalSaw"
    PICT_NORMAL_POSITION = "pictNormalPosition"
    PICT_ON_RIM = "pictOnRim"
    PICT_OPEN = "pictOpen"
    PICT_OPEN_RIM_SHOT = "pictOpenRimShot"
    PICT_PISTOL_SHOT = "pictPistolShot"
    PICT_POLICE_WHISTLE = "pictPoliceWhistle"
    PICT_QUIJADA = "pictQuijada"
    PICT_RAINSTICK = "pictRainstick"
    PICT_RATCHET = "pictRatchet"
    PICT_RECO_RECO = "pictRecoReco"
    PICT_RIGHT_HAND_SQUARE = "pictRightHandSquare"
    PICT_RIM1 = "pictRim1"
    PICT_RIM2 = "pictRim2"
    PICT_RIM3 = "pictRim3"
    PICT_RIM_SHOT_ON_STEM = "pictRimShotOnStem"
    PICT_SANDPAPER_BLOCKS = "pictSandpaperBlocks"
    PICT_SCRAPE_AROUND_RIM = "pictScrapeAroundRim"
    PICT_SCRAPE_AROUND_RIM_CLOCKWISE = "pictScrapeAroundRimClockwise"
    PICT_SCRAPE_CENTER_TO_EDGE = "pictScrapeCenterToEdge"
    PICT_SCRAPE_EDGE_TO_CENTER = "pictScrapeEdgeToCenter"
    PICT_SHELL_BELLS = "pictShellBells"
    PICT_SHELL_CHIMES = "pictShellChimes"
    PICT_SIREN = "pictSiren"
    PICT_SIZZLE_CYMBAL = "pictSizzleCymbal"
    PICT_SLEIGH_BELL = "pictSleighBell"
    PICT_SLEIGH_BELL_SMITH_BRINDLE = "pictSleighBellSmithBrindle"
    PICT_SLIDE_BRUSH_ON_GONG = "pictSlideBrushOnGong"
    PICT_SLIDE_WHISTLE = "pictSlideWhistle"
    PICT_SLIT_DRUM = "pictSlitDrum"
    PICT_SNARE_DRUM = "pictSnareDrum"
    PICT_SNARE_DRUM_MILITARY = "pictSnareDrumMilitary"
    PICT_SNARE_DRUM_SNARES_OFF = "pictSnareDrumSnaresOff"
    PICT_STEEL_DRUMS = "pictSteelDrums"
    PICT_STICK_SHOT = "pictStickShot"
    PICT_SUSPENDED_CYMBAL = "pictSuspendedCymbal"
    PICT_SWISH_STEM = "pictSwishStem"
    PICT_TABLA = "pictTabla"
    PICT_TAM_TAM = "pictTamTam"
    PICT_TAM_TAM_WITH_BEATER = "pictTamTamWithBeater"
    PICT_TAMBOURINE = "pictTambourine"
    PICT_TEMPLE_BLOCKS = "pictTempleBlocks"
    PICT_TENOR_DRUM = "pictTenorDrum"
    PICT_THUNDERSHEET = "pictThundersheet"
    PICT_TIMBALES = "pictTimbales"
    PICT_TIMPANI = "pictTimpani"
    PICT_TOM_TOM = "pictTomTom"
    PICT_TOM_TOM_CHINESE = "pictTomTomChinese"
    PICT_TOM_TOM_INDO_AMERICAN = "pictTomTomIndoAmerican"
    PICT_TOM_TOM_JAPANESE = "pictTomTomJapanese"
    PICT_TRIANGLE = "pictTriangle"
    PICT_TUBAPHONE = "pictTubaphone"
    PICT_TURN_LEFT_STEM = "pictTurnLeftStem"
    PICT_TURN_RIGHT_LEFT_STEM = "pictTurnRightLeftStem"
    PICT_TURN_RIGHT_STEM = "pictTurnRightStem"
    PICT_TYPEWRITER = "pictTypewriter"
    PICT_VIB = "pictVib"
    PICT_VIB_MOTOR_OFF = "pictVibMotorOff"
    PICT_VIB_SMITH_BRINDLE = "pictVibSmithBrindle"
    PICT_VIETNAMESE_HAT = "pictVietnameseHat"
    PICT_WHIP = "pictWhip"
    PICT_WHISTLE = "pictWhistle"
    PICT_WIND_CHIMES_GLASS = "pictWindChimesGlass"
    PICT_WIND_MACHINE = "pictWindMachine"
    PICT_WOOD_BLOCK = "pictWoodBlock"
    PICT_XYL = "pictXyl"
    PICT_XYL_BASS = "pictXylBass"
    PICT_XYL_SMITH_BRINDLE = "pictXylSmithBrindle"
    PICT_XYL_TENOR = "pictXylTenor"
    PICT_XYL_TENOR_TROUGH = "pictXylTenorTrough"
    PICT_XYL_TROUGH = "pictXylTrough"
    PLUCKED_BUZZ_PIZZICATO = "pluckedBuzzPizzicato"
    PLUCKED_DAMP = "pluckedDamp"
    PLUCKED_DAMP_ALL = "pluckedDampAll"
    PLUCKED_DAMP_ON_STEM = "pluckedDampOnStem"
    PLUCKED_FINGERNAIL_FLICK = "pluckedFingernailFlick"
    PLUCKED_LEFT_HAND_PIZZICATO = "pluckedLeftHandPizzicato"
    PLUCKED_PLECTRUM = "pluckedPlectrum"
    PLUCKED_SNAP_PIZZICATO_ABOVE = "pluckedSnapPizzicatoAbove"
    PLUCKED_SNAP_PIZZICATO_BELOW = "pluckedSnapPizzicatoBelow"
    PLUCKED_WITH_FINGERNAILS = "pluckedWithFingernails"
    QUINDICESIMA = "quindicesima"
    QUINDICESIMA_ALTA = "quindicesimaAlta"
    QUINDICESIMA_BASSA = "quindicesimaBassa"
    QUINDICESIMA_BASSA_MB = "quindicesimaBassaMb"
    REPEAT1_BAR = "repeat1Bar"
    REPEAT2_BARS = "repeat2Bars"
    REPEAT4_BARS = "repeat4Bars"
    REPEAT_BAR_LOWER_DOT = "repeatBarLowerDot"
    REPEAT_BAR_SLASH = "repeatBarSlash"
    REPEAT_BAR_UPPER_DOT = "repeatBarUpperDot"
    REPEAT_DOT = "repeatDot"
    REPEAT_DOTS = "repeatDots"
    REPEAT_LEFT = "repeatLeft"
    REPEAT_RIGHT = "repeatRight"
    REPEAT_RIGHT_LEFT = "repeatRightLeft"
    REST1024TH = "rest1024th"
    REST128TH = "rest128th"
    REST16TH = "rest16th"
    REST256TH = "rest256th"
    REST32ND = "rest32nd"
    REST512TH = "rest512th"
    REST64TH = "rest64th"
    REST8TH = "rest8th"
    REST_DOUBLE_WHOLE = "restDoubleWhole"
    REST_DOUBLE_WHOLE_LEGER_LINE = "restDoubleWholeLegerLine"
    REST_HBAR = "restHBar"
    REST_HBAR_LEFT = "restHBarLeft"
    REST_HBAR_MIDDLE = "restHBarMiddle"
    REST_HBAR_RIGHT = "restHBarRight"
    REST_HALF = "restHalf"
    REST_HALF_LEGER_LINE = "restHalfLegerLine"
    REST_LONGA = "restLonga"
    REST_MAXIMA = "restMaxima"
    REST_QUARTER = "restQuarter"
    REST_QUARTER_OLD = "restQuarterOld"
    REST_QUARTER_Z = "restQuarterZ"
    REST_WHOLE = "restWhole"
    REST_WHOLE_LEGER_LINE = "restWholeLegerLine"
    REVERSED_BRACE = "reversedBrace"
    REVERSED_BRACKET_BOTTOM = "reversedBracketBottom"
    REVERSED_BRACKET_TOP = "reversedBracketTop"
    RIGHT_REPEAT_SMALL = "rightRepeatSmall"
    SCALE_DEGREE1 = "scaleDegree1"
    SCALE_DEGREE2 = "scaleDegree2"
    SCALE_DEGREE3 = "scaleDegree3"
    SCALE_DEGREE4 = "scaleDegree4"
    SCALE_DEGREE5 = "scaleDegree5"
    SCALE_DEGREE6 = "scaleDegree6"
    SCALE_DEGREE7 = "scaleDegree7"
    SCALE_DEGREE8 = "scaleDegree8"
    SCALE_DEGREE9 = "scaleDegree9"
    SEGNO = "segno"
    SEGNO_SERPENT1 = "segnoSerpent1"
    SEGNO_SERPENT2 = "segnoSerpent2"
    SEMIPITCHED_PERCUSSION_CLEF1 = "semipitchedPercussionClef1"
    SEMIPITCHED_PERCUSSION_CLEF2 = "semipitchedPercussionClef2"
    SPLIT_BAR_DIVIDER = "splitBarDivider"
    STAFF1_LINE = "staff1Line"
    STAFF1_LINE_NARROW = "staff1LineNarrow"
    STAFF1_LINE_WIDE = "staff1LineWide"
    STAFF2_LINES = "staff2Lines"
    STAFF2_LINES_NARROW = "staff2LinesNarrow"
    STAFF2_LINES_WIDE = "staff2LinesWide"
    STAFF3_LINES = "staff3Lines"
    STAFF3_LINES_NARROW = "staff3LinesNarrow"
    STAFF3_LINES_WIDE = "staff3LinesWide"
    STAFF4_LINES = "staff4Lines"
    STAFF4_LINES_NARROW = "staff4LinesNarrow"
    STAFF4_LINES_WIDE = "staff4LinesWide"
    STAFF5_LINES = "staff5Lines"
    STAFF5_LINES_NARROW = "staff5LinesNarrow"
    STAFF5_LINES_WIDE = "staff5LinesWide"
    STAFF6_LINES = "staff6Lines"
    STAFF6_LINES_NARROW = "staff6LinesNarrow"
    STAFF6_LINES_WIDE = "staff6LinesWide"
    STAFF_DIVIDE_ARROW_DOWN = "staffDivideArrowDown"
    STAFF_DIVIDE_ARROW_UP = "staffDivideArrowUp"
    STAFF_DIVIDE_ARROW_UP_DOWN = "staffDivideArrowUpDown"
    STAFF_POS_LOWER1 = "staffPosLower1"
    STAFF_POS_LOWER2 = "staffPosLower2"
    STAFF_POS_LOWER3 = "staffPosLower3"
    STAFF_POS_LOWER4 = "staffPosLower4"
    STAFF_POS_LOWER5 = "staffPosLower5"
    STAFF_POS_LOWER6 = "staffPosLower6"
    STAFF_POS_LOWER7 = "staffPosLower7"
    STAFF_POS_LOWER8 = "staffPosLower8"
    STAFF_POS_RAISE1 = "staffPosRaise1"
    STAFF_POS_RAISE2 = "staffPosRaise2"
    STAFF_POS_RAISE3 = "staffPosRaise3"
    STAFF_POS_RAISE4 = "staffPosRaise4"
    STAFF_POS_RAISE5 = "staffPosRaise5"
    STAFF_POS_RAISE6 = "staffPosRaise6"
    STAFF_POS_RAISE7 = "staffPosRaise7"
    STAFF_POS_RAISE8 = "staffPosRaise8"
    STEM = "stem"
    STEM_BOW_ON_BRIDGE = "stemBowOnBridge"
    STEM_BOW_ON_TAILPIECE = "stemBowOnTailpiece"
    STEM_BUZZ_ROLL = "stemBuzzRoll"
    STEM_DAMP = "stemDamp"
    STEM_HARP_STRING_NOISE = "stemHarpStringNoise"
    STEM_MULTIPHONICS_BLACK = "stemMultiphonicsBlack"
    STEM_MULTIPHONICS_BLACK_WHITE = "stemMultiphonicsBlackWhite"
    STEM_MULTIPHONICS_WHITE = "stemMultiphonicsWhite"
    STEM_PENDERECKI_TREMOLO = "stemPendereckiTremolo"
    STEM_RIM_SHOT = "stemRimShot"
    STEM_SPRECHGESANG = "stemSprechgesang"
    STEM_SUL_PONTICELLO = "stemSulPonticello"
    STEM_SWISHED = "stemSwished"
    STEM_VIBRATO_PULSE = "stemVibratoPulse"
    STRINGS_BOW_BEHIND_BRIDGE = "stringsBowBehindBridge"
    STRINGS_BOW_BEHIND_BRIDGE_FOUR_STRINGS = "stringsBowBehindBridgeFourStrings"
    STRINGS_BOW_BEHIND_BRIDGE_ONE_STRING = "stringsBowBehindBridgeOneString"
    STRINGS_BOW_BEHIND_BRIDGE_THREE_STRINGS = "stringsBowBehindBridgeThreeStrings"
    STRINGS_BOW_BEHIND_BRIDGE_TWO_STRINGS = "stringsBowBehindBridgeTwoStrings"
    STRINGS_BOW_ON_BRIDGE = "stringsBowOnBridge"
    STRINGS_BOW_ON_TAILPIECE = "stringsBowOnTailpiece"
    STRINGS_CHANGE_BOW_DIRECTION = "stringsChangeBowDirection"
    STRINGS_DOWN_BOW = "stringsDownBow"
    STRINGS_DOWN_BOW_AWAY_FROM_BODY = "stringsDownBowAwayFromBody"
    STRINGS_DOWN_BOW_BEYOND_BRIDGE = "stringsDownBowBeyondBridge"
    STRINGS_DOWN_BOW_TOWARDS_BODY = "stringsDownBowTowardsBody"
    STRINGS_DOWN_BOW_TURNED = "stringsDownBowTurned"
    STRINGS_FOUETTE = "stringsFouette"
    STRINGS_HALF_HARMONIC = "stringsHalfHarmonic"
    STRINGS_HARMONIC = "stringsHarmonic"
    STRINGS_JETE_ABOVE = "stringsJeteAbove"
    STRINGS_JETE_BELOW = "stringsJeteBelow"
    STRINGS_MUTE_OFF = "stringsMuteOff"
    STRINGS_MUTE_ON = "stringsMuteOn"
    STRINGS_OVERPRESSURE_DOWN_BOW = "stringsOverpressureDownBow"
    STRINGS_OVERPRESSURE_NO_DIRECTION = "stringsOverpressureNoDirection"
    STRINGS_OVERPRESSURE_POSSIBILE_DOWN_BOW = "stringsOverpressurePossibileDownBow"
    STRINGS_OVERPRESSURE_POSSIBILE_UP_BOW = "stringsOverpressurePossibileUpBow"
    STRINGS_OVERPRESSURE_UP_BOW = "stringsOverpressureUpBow"
    STRINGS_SCRAPE_CIRCULAR_CLOCKWISE = "stringsScrapeCircularClockwise"
    STRINGS_SCRAPE_CIRCULAR_COUNTERCLOCKWISE = "stringsScrapeCircularCounterclockwise"
    STRINGS_SCRAPE_PARALLEL_INWARD = "stringsScrapeParallelInward"
    STRINGS_SCRAPE_PARALLEL_OUTWARD = "stringsScrapeParallelOutward"
    STRINGS_THUMB_POSITION = "stringsThumbPosition"
    STRINGS_THUMB_POSITION_TURNED = "stringsThumbPositionTurned"
    STRINGS_TRIPLE_CHOP_INWARD = "stringsTripleChopInward"
    STRINGS_TRIPLE_CHOP_OUTWARD = "stringsTripleChopOutward"
    STRINGS_UP_BOW = "stringsUpBow"
    STRINGS_UP_BOW_AWAY_FROM_BODY = "stringsUpBowAwayFromBody"
    STRINGS_UP_BOW_BEYOND_BRIDGE = "stringsUpBowBeyondBridge"
    STRINGS_UP_BOW_TOWARDS_BODY = "stringsUpBowTowardsBody"
    STRINGS_UP_BOW_TURNED = "stringsUpBowTurned"
    STRINGS_VIBRATO_PULSE = "stringsVibratoPulse"
    SWISS_RUDIMENTS_NOTEHEAD_BLACK_DOUBLE = "swissRudimentsNoteheadBlackDouble"
    SWISS_RUDIMENTS_NOTEHEAD_BLACK_FLAM = "swissRudimentsNoteheadBlackFlam"
    SWISS_RUDIMENTS_NOTEHEAD_HALF_DOUBLE = "swissRudimentsNoteheadHalfDouble"
    SWISS_RUDIMENTS_NOTEHEAD_HALF_FLAM = "swissRudimentsNoteheadHalfFlam"
    SYSTEM_DIVIDER = "systemDivider"
    SYSTEM_DIVIDER_EXTRA_LONG = "systemDividerExtraLong"
    SYSTEM_DIVIDER_LONG = "systemDividerLong"
    TEXT_AUGMENTATION_DOT = "textAugmentationDot"
    TEXT_BLACK_NOTE_FRAC16TH_LONG_STEM = "textBlackNoteFrac16thLongStem"
    TEXT_BLACK_NOTE_FRAC16TH_SHORT_STEM = "textBlackNoteFrac16thShortStem"
    TEXT_BLACK_NOTE_FRAC32ND_LONG_STEM = "textBlackNoteFrac32ndLongStem"
    TEXT_BLACK_NOTE_FRAC8TH_LONG_STEM = "textBlackNoteFrac8thLongStem"
    TEXT_BLACK_NOTE_FRAC8TH_SHORT_STEM = "textBlackNoteFrac8thShortStem"
    TEXT_BLACK_NOTE_LONG_STEM = "textBlackNoteLongStem"
    TEXT_BLACK_NOTE_SHORT_STEM = "textBlackNoteShortStem"
    TEXT_CONT16TH_BEAM_LONG_STEM = "textCont16thBeamLongStem"
    TEXT_CONT16TH_BEAM_SHORT_STEM = "textCont16thBeamShortStem"
    TEXT_CONT32ND_BEAM_LONG_STEM = "textCont32ndBeamLongStem"
    TEXT_CONT8TH_BEAM_LONG_STEM = "textCont8thBeamLongStem"
    TEXT_CONT8TH_BEAM_SHORT_STEM = "textCont8thBeamShortStem"
    TEXT_HEADLESS_BLACK_NOTE_FRAC16TH_LONG_STEM = "textHeadlessBlackNoteFrac16thLongStem"
    TEXT_HEADLESS_BLACK_NOTE_FRAC16TH_SHORT_STEM = "textHeadlessBlackNoteFrac16thShortStem"
    TEXT_HEADLESS_BLACK_NOTE_FRAC32ND_LONG_STEM = "textHeadlessBlackNoteFrac32ndLongStem"
    TEXT_HEADLESS_BLACK_NOTE_FRAC8TH_LONG_STEM = "textHeadlessBlackNoteFrac8thLongStem"
    TEXT_HEADLESS_BLACK_NOTE_FRAC8TH_SHORT_STEM = "textHeadlessBlackNoteFrac8thShortStem"
    TEXT_HEADLESS_BLACK_NOTE_LONG_STEM = "textHeadlessBlackNoteLongStem"
    TEXT_HEADLESS_BLACK_NOTE_SHORT_STEM = "textHeadlessBlackNoteShortStem"
    TEXT_TIE = "textTie"
    TEXT_TUPLET3_LONG_STEM = "textTuplet3LongStem"
    TEXT_TUPLET3_SHORT_STEM = "textTuplet3ShortStem"
    TEXT_TUPLET_BRACKET_END_LONG_STEM = "textTupletBracketEndLongStem"
    TEXT_TUPLET_BRACKET_END_SHORT_STEM = "textTupletBracketEndShortStem"
    TEXT_TUPLET_BRACKET_START_LONG_STEM = "textTupletBracketStartLongStem"
    TEXT_TUPLET_BRACKET_START_SHORT_STEM = "textTupletBracketStartShortStem"
    TIME_SIG0 = "timeSig0"
    TIME_SIG0_REVERSED = "timeSig0Reversed"
    TIME_SIG0_TURNED = "timeSig0Turned"
    TIME_SIG1 = "timeSig1"
    TIME_SIG1_REVERSED = "timeSig1Reversed"
    TIME_SIG1_TURNED = "timeSig1Turned"
    TIME_SIG2 = "timeSig2"
    TIME_SIG2_REVERSED = "timeSig2Reversed"
    TIME_SIG2_TURNED = "timeSig2Turned"
    TIME_SIG3 = "timeSig3"
    TIME_SIG3_REVERSED = "timeSig3Reversed"
    TIME_SIG3_TURNED = "timeSig3Turned"
    TIME_SIG4 = "timeSig4"
    TIME_SIG4_REVERSED = "timeSig4Reversed"
    TIME_SIG4_TURNED = "timeSig4Turned"
    TIME_SIG5 = "timeSig5"
    TIME_SIG5_REVERSED = "timeSig5Reversed"
    TIME_SIG5_TURNED = "timeSig5Turned"
    TIME_SIG6 = "timeSig6"
    TIME_SIG6_REVERSED = "timeSig6Reversed"
    TIME_SIG6_TURNED = "timeSig6Turned"
    TIME_SIG7 = "timeSig7"
    TIME_SIG7_REVERSED = "timeSig7Reversed"
    TIME_SIG7_TURNED = "timeSig7Turned"
    TIME_SIG8 = "timeSig8"
    TIME_SIG8_REVERSED = "timeSig8Reversed"
    TIME_SIG8_TURNED = "timeSig8Turned"
    TIME_SIG9 = "timeSig9"
    TIME_SIG9_REVERSED = "timeSig9Reversed"
    TIME_SIG9_TURNED = "timeSig9Turned"
    TIME_SIG_BRACKET_LEFT = "timeSigBracketLeft"
    TIME_SIG_BRACKET_LEFT_SMALL = "timeSigBracketLeftSmall"
    TIME_SIG_BRACKET_RIGHT = "timeSigBracketRight"
    TIME_SIG_BRACKET_RIGHT_SMALL = "timeSigBracketRightSmall"
    TIME_SIG_COMB_DENOMINATOR = "timeSigCombDenominator"
    TIME_SIG_COMB_NUMERATOR = "timeSigCombNumerator"
    TIME_SIG_COMMA = "timeSigComma"
    TIME_SIG_COMMON = "timeSigCommon"
    TIME_SIG_COMMON_REVERSED = "timeSigCommonReversed"
    TIME_SIG_COMMON_TURNED = "timeSigCommonTurned"
    TIME_SIG_CUT2 = "timeSigCut2"
    TIME_SIG_CUT3 = "timeSigCut3"
    TIME_SIG_CUT_COMMON = "timeSigCutCommon"
    TIME_SIG_CUT_COMMON_REVERSED = "timeSigCutCommonReversed"
    TIME_SIG_CUT_COMMON_TURNED = "timeSigCutCommonTurned"
    TIME_SIG_EQUALS = "timeSigEquals"
    TIME_SIG_FRACTION_HALF = "timeSigFractionHalf"
    TIME_SIG_FRACTION_ONE_THIRD = "timeSigFractionOneThird"
    TIME_SIG_FRACTION_QUARTER = "timeSigFractionQuarter"
    TIME_SIG_FRACTION_THREE_QUARTERS = "timeSigFractionThreeQuarters"
    TIME_SIG_FRACTION_TWO_THIRDS = "timeSigFractionTwoThirds"
    TIME_SIG_FRACTIONAL_SLASH = "timeSigFractionalSlash"
    TIME_SIG_MINUS = "timeSigMinus"
    TIME_SIG_MULTIPLY = "timeSigMultiply"
    TIME_SIG_OPEN_PENDERECKI = "timeSigOpenPenderecki"
    TIME_SIG_PARENS_LEFT = "timeSigParensLeft"
    TIME_SIG_PARENS_LEFT_SMALL = "timeSigParensLeftSmall"
    TIME_SIG_PARENS_RIGHT = "timeSigParensRight"
    TIME_SIG_PARENS_RIGHT_SMALL = "timeSigParensRightSmall"
    TIME_SIG_PLUS = "timeSigPlus"
    TIME_SIG_PLUS_SMALL = "timeSigPlusSmall"
    TIME_SIG_SLASH = "timeSigSlash"
    TIME_SIG_X = "timeSigX"
    TREMOLO1 = "tremolo1"
    TREMOLO2 = "tremolo2"
    TREMOLO3 = "tremolo3"
    TREMOLO4 = "tremolo4"
    TREMOLO5 = "tremolo5"
    TREMOLO_DIVISI_DOTS2 = "tremoloDivisiDots2"
    TREMOLO_DIVISI_DOTS3 = "tremoloDivisiDots3"
    TREMOLO_DIVISI_DOTS4 = "tremoloDivisiDots4"
    TREMOLO_DIVISI_DOTS6 = "tremoloDivisiDots6"
    TREMOLO_FINGERED1 = "tremoloFingered1"
    TREMOLO_FINGERED2 = "tremoloFingered2"
    TREMOLO_FINGERED3 = "tremoloFingered3"
    TREMOLO_FINGERED4 = "tremoloFingered4"
    TREMOLO_FINGERED5 = "tremoloFingered5"
    TUPLET0 = "tuplet0"
    TUPLET1 = "tuplet1"
    TUPLET2 = "tuplet2"
    TUPLET3 = "tuplet3"
    TUPLET4 = "tuplet4"
    TUPLET5 = "tuplet5"
    TUPLET6 = "tuplet6"
    TUPLET7 = "tuplet7"
    TUPLET8 = "tuplet8"
    TUPLET9 = "tuplet9"
    TUPLET_COLON = "tupletColon"
    UNMEASURED_TREMOLO = "unmeasuredTremolo"
    UNMEASURED_TREMOLO_SIMPLE = "unmeasuredTremoloSimple"
    UNPITCHED_PERCUSSION_CLEF1 = "unpitchedPercussionClef1"
    UNPITCHED_PERCUSSION_CLEF2 = "unpitchedPercussionClef2"
    VENTIDUESIMA = "ventiduesima"
    VENTIDUESIMA_ALTA = "ventiduesimaAlta"
    VENTIDUESIMA_BASSA = "ventiduesimaBassa"
    VENTIDUESIMA_BASSA_MB = "ventiduesimaBassaMb"
    VOCAL_FINGER_CLICK_STOCKHAUSEN = "vocalFingerClickStockhausen"
    VOCAL_HALB_GESUNGEN = "vocalHalbGesungen"
    VOCAL_MOUTH_CLOSED = "vocalMouthClosed"
    VOCAL_MOUTH_OPEN = "vocalMouthOpen"
    VOCAL_MOUTH_PURSED = "vocalMouthPursed"
    VOCAL_MOUTH_SLIGHTLY_OPEN = "vocalMouthSlightlyOpen"
    VOCAL_MOUTH_WIDE_OPEN = "vocalMouthWideOpen"
    VOCAL_NASAL_VOICE = "vocalNasalVoice"
    VOCAL_SPRECHGESANG = "vocalSprechgesang"
    VOCAL_TONGUE_CLICK_STOCKHAUSEN = "vocalTongueClickStockhausen"
    VOCAL_TONGUE_FINGER_CLICK_STOCKHAUSEN = "vocalTongueFingerClickStockhausen"
    VOCALS_SUSSURANDO = "vocalsSussurando"
    WIGGLE_ARPEGGIATO_DOWN = "wiggleArpeggiatoDown"
    WIGGLE_ARPEGGIATO_DOWN_ARROW = "wiggleArpeggiatoDownArrow"
    WIGGLE_ARPEGGIATO_DOWN_SWASH = "wiggleArpeggiatoDownSwash"
    WIGGLE_ARPEGGIATO_UP = "wiggleArpeggiatoUp"
    WIGGLE_ARPEGGIATO_UP_ARROW = "wiggleArpeggiatoUpArrow"
    WIGGLE_ARPEGGIATO_UP_SWASH = "wiggleArpeggiatoUpSwash"
    WIGGLE_CIRCULAR = "wiggleCircular"
    WIGGLE_CIRCULAR_CONSTANT = "wiggleCircularConstant"
    WIGGLE_CIRCULAR_CONSTANT_FLIPPED = "wiggleCircularConstantFlipped"
    WIGGLE_CIRCULAR_CONSTANT_FLIPPED_LARGE = "wiggleCircularConstantFlippedLarge"
    WIGGLE_CIRCULAR_CONSTANT_LARGE = "wiggleCircularConstantLarge"
    WIGGLE_CIRCULAR_END = "wiggleCircularEnd"
    WIGGLE_CIRCULAR_LARGE = "wiggleCircularLarge"
    WIGGLE_CIRCULAR_LARGER = "wiggleCircularLarger"
    WIGGLE_CIRCULAR_LARGER_STILL = "wiggleCircularLargerStill"
    WIGGLE_CIRCULAR_LARGEST = "wiggleCircularLargest"
    WIGGLE_CIRCULAR_SMALL = "wiggleCircularSmall"
    WIGGLE_CIRCULAR_START = "wiggleCircularStart"
    WIGGLE_GLISSANDO = "wiggleGlissando"
    WIGGLE_GLISSANDO_GROUP1 = "wiggleGlissandoGroup1"
    WIGGLE_GLISSANDO_GROUP2 = "wiggleGlissandoGroup2"
    WIGGLE_GLISSANDO_GROUP3 = "wiggleGlissandoGroup3"
    WIGGLE_RANDOM1 = "wiggleRandom1"
    WIGGLE_RANDOM2 = "wiggleRandom2"
    WIGGLE_RANDOM3 = "wiggleRandom3"
    WIGGLE_RANDOM4 = "wiggleRandom4"
    WIGGLE_SAWTOOTH = "wiggleSawtooth"
    WIGGLE_SAWTOOTH_NARROW = "wiggleSawtoothNarrow"
    WIGGLE_SAWTOOTH_WIDE = "wiggleSawtoothWide"
    WIGGLE_SQUARE_WAVE = "wiggleSquareWave"
    WIGGLE_SQUARE_WAVE_NARROW = "wiggleSquareWaveNarrow"
    WIGGLE_SQUARE_WAVE_WIDE = "wiggleSquareWaveWide"
    WIGGLE_TRILL = "wiggleTrill"
    WIGGLE_TRILL_FAST = "wiggleTrillFast"
    WIGGLE_TRILL_FASTER = "wiggleTrillFaster"
    WIGGLE_TRILL_FASTER_STILL = "wiggleTrillFasterStill"
    WIGGLE_TRILL_FASTEST = "wiggleTrillFastest"
    WIGGLE_TRILL_SLOW = "wiggleTrillSlow"
    WIGGLE_TRILL_SLOWER = "wiggleTrillSlower"
    WIGGLE_TRILL_SLOWER_STILL = "wiggleTrillSlowerStill"
    WIGGLE_TRILL_SLOWEST = "wiggleTrillSlowest"
    WIGGLE_VIBRATO_LARGEST_SLOWER = "wiggleVIbratoLargestSlower"
    WIGGLE_VIBRATO_MEDIUM_SLOWER = "wiggleVIbratoMediumSlower"
    WIGGLE_VIBRATO = "wiggleVibrato"
    WIGGLE_VIBRATO_LARGE_FAST = "wiggleVibratoLargeFast"
    WIGGLE_VIBRATO_LARGE_FASTER = "wiggleVibratoLargeFaster"
    WIGGLE_VIBRATO_LARGE_FASTER_STILL = "wiggleVibratoLargeFasterStill"
    WIGGLE_VIBRATO_LARGE_FASTEST = "wiggleVibratoLargeFastest"
    WIGGLE_VIBRATO_LARGE_SLOW = "wiggleVibratoLargeSlow"
    WIGGLE_VIBRATO_LARGE_SLOWER = "wiggleVibratoLargeSlower"
    WIGGLE_VIBRATO_LARGE_SLOWEST = "wiggleVibratoLargeSlowest"
    WIGGLE_VIBRATO_LARGEST_FAST = "wiggleVibratoLargestFast"
    WIGGLE_VIBRATO_LARGEST_FASTER = "wiggleVibratoLargestFaster"
    WIGGLE_VIBRATO_LARGEST_FASTER_STILL = "wiggleVibratoLargestFasterStill"
    WIGGLE_VIBRATO_LARGEST_FASTEST = "wiggleVibratoLargestFastest"
    WIGGLE_VIBRATO_LARGEST_SLOW = "wiggleVibratoLargestSlow"
    WIGGLE_VIBRATO_LARGEST_SLOWEST = "wiggleVibratoLargestSlowest"
    WIGGLE_VIBRATO_MEDIUM_FAST = "wiggleVibratoMediumFast"
    WIGGLE_VIBRATO_MEDIUM_FASTER = "wiggleVibratoMediumFaster"
    WIGGLE_VIBRATO_MEDIUM_FASTER_STILL = "wiggleVibratoMediumFasterStill"
    WIGGLE_VIBRATO_MEDIUM_FASTEST = "wiggleVibratoMediumFastest"
    WIGGLE_VIBRATO_MEDIUM_SLOW = "wiggleVibratoMediumSlow"
    WIGGLE_VIBRATO_MEDIUM_SLOWEST = "wiggleVibratoMediumSlowest"
    WIGGLE_VIBRATO_SMALL_FAST = "wiggleVibratoSmallFast"
    WIGGLE_VIBRATO_SMALL_FASTER = "wiggleVibratoSmallFaster"
    WIGGLE_VIBRATO_SMALL_FASTER_STILL = "wiggleVibratoSmallFasterStill"
    WIGGLE_VIBRATO_SMALL_FASTEST = "wiggleVibratoSmallFastest"
    WIGGLE_VIBRATO_SMALL_SLOW = "wiggleVibratoSmallSlow"
    WIGGLE_VIBRATO_SMALL_SLOWER = "wiggleVibratoSmallSlower"
    WIGGLE_VIBRATO_SMALL_SLOWEST = "wiggleVibratoSmallSlowest"
    WIGGLE_VIBRATO_SMALLEST_FAST = "wiggleVibratoSmallestFast"
    WIGGLE_VIBRATO_SMALLEST_FASTER = "wiggleVibratoSmallestFaster"
    WIGGLE_VIBRATO_SMALLEST_FASTER_STILL = "wiggleVibratoSmallestFasterStill"
    WIGGLE_VIBRATO_SMALLEST_FASTEST = "wiggleVibratoSmallestFastest"
    WIGGLE_VIBRATO_SMALLEST_SLOW = "wiggleVibratoSmallestSlow"
    WIGGLE_VIBRATO_SMALLEST_SLOWER = "wiggleVibratoSmallestSlower"
    WIGGLE_VIBRATO_SMALLEST_SLOWEST = "wiggleVibratoSmallestSlowest"
    WIGGLE_VIBRATO_START = "wiggleVibratoStart"
    WIGGLE_VIBRATO_WIDE = "wiggleVibratoWide"
    WIGGLE_WAVY = "wiggleWavy"
    WIGGLE_WAVY_NARROW = "wiggleWavyNarrow"
    WIGGLE_WAVY_WIDE = "wiggleWavyWide"
    WIND_CLOSED_HOLE = "windClosedHole"
    WIND_FLAT_EMBOUCHURE = "windFlatEmbouchure"
    WIND_HALF_CLOSED_HOLE1 = "windHalfClosedHole1"
    WIND_HALF_CLOSED_HOLE2 = "windHalfClosedHole2"
    WIND_HALF_CLOSED_HOLE3 = "windHalfClosedHole3"
    WIND_LESS_RELAXED_EMBOUCHURE = "windLessRelaxedEmbouchure"
    WIND_LESS_TIGHT_EMBOUCHURE = "windLessTightEmbouchure"
    WIND_MULTIPHONICS_BLACK_STEM = "windMultiphonicsBlackStem"
    WIND_MULTIPHONICS_BLACK_WHITE_STEM = "windMultiphonicsBlackWhiteStem"
    WIND_MULTIPHONICS_WHITE_STEM = "windMultiphonicsWhiteStem"
    WIND_OPEN_HOLE = "windOpenHole"
    WIND_REED_POSITION_IN = "windReedPositionIn"
    WIND_REED_POSITION_NORMAL = "windReedPositionNormal"
    WIND_REED_POSITION_OUT = "windReedPositionOut"
    WIND_RELAXED_EMBOUCHURE = "windRelaxedEmbouchure"
    WIND_RIM_ONLY = "windRimOnly"
    WIND_SHARP_EMBOUCHURE = "windSharpEmbouchure"
    WIND_STRONG_AIR_PRESSURE = "windStrongAirPressure"
    WIND_THREE_QUARTERS_CLOSED_HOLE = "windThreeQuartersClosedHole"
    WIND_TIGHT_EMBOUCHURE = "windTightEmbouchure"
    WIND_TRILL_KEY = "windTrillKey"
    WIND_VERY_TIGHT_EMBOUCHURE = "windVeryTightEmbouchure"
    WIND_WEAK_AIR_PRESSURE = "windWeakAirPressure"

    @property
    def smufl_name(self) -> str:
        """The registered SMuFL name, as written in metadata files."""
        return self.value

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Glyph):
            return self.value < other.value
        return NotImplemented


__all__ = ["Glyph"]
