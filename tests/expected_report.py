# Expected rendering of the ``sample_transactions`` fixture.
SAMPLE_REPORT = (
    "INCOME               EXPENSE              MONTHLY   CATEGORY   ACCOUNT\n"
    "work                                        800.00\n"
    "                     petrol               ( 256.80) car        direct debit\n"
    "                     food                 ( 171.20)            direct debit\n"
    "                     car insurance        (  20.00) car        automatic\n"
    "----------------------------------------------------------------------\n"
    "TOTAL:                                      352.00\n"
    "\n"
    "Breakdown:\n"
    "car           276.80\n"
    "(other)       171.20\n"
    "\n"
    "Coverage:\n"
    "   428.00 -> direct debit\n"
    "    20.00 -> automatic\n"
    "     0.00 (unallocated)\n"
)
