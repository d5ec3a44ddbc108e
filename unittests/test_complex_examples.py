from dataclasses import dataclass, field
from typing import Optional

import pytest

from validatable import VALID, Invalid, Validatable, ValidationError


class TestComplexExamples:
    def test_layered_rules_on_one_attribute_are_checked_in_declaration_order(self):
        @dataclass
        class BankingData(Validatable):
            iban: Optional[str] = None
            owner: Optional[str] = None
            contract_ids: list[str] = field(default_factory=list)

        BankingData.declare("iban", presence=True)
        BankingData.declare("owner", presence=True, type=str)
        BankingData.declare("iban", format=r"[A-Z]{2}\d{20}")
        BankingData.declare("contract_ids", type=list[str])

        assert BankingData(iban="DE52940594210000082271", owner="John Doe").validate() is VALID
        # the format of the iban is declared after the owner's rules
        assert BankingData(iban="DEA9370400440532013000", owner=None).first_failure() == Invalid("owner", "presence")
        with pytest.raises(ValidationError, match="iban failed format validation"):
            BankingData(iban="DEA9370400440532013000", owner="John Doe").validate()
        assert not BankingData(iban="DE52940594210000082271", owner="John Doe", contract_ids=[1, 2]).is_valid()
        assert not BankingData(iban="DE52940594210000082271", owner="John Doe", contract_ids=["1", 2]).is_valid()

    def test_rules_are_shared_by_all_instances(self):
        @dataclass
        class Meter(Validatable):
            meter_id: Optional[str] = None

        Meter.declare("meter_id", presence=True, format=r"1[A-Z]{3}\d{7}")
        meters = [Meter("1ESY1160449"), Meter(""), Meter("1ESY116044")]
        assert [meter.is_valid() for meter in meters] == [True, False, False]
        assert [meter.first_failure() for meter in meters] == [
            None,
            Invalid("meter_id", "presence"),
            Invalid("meter_id", "format"),
        ]
