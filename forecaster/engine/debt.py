"""Month-by-month debt schedule for repayment and interest-only mortgages.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from forecaster.engine.rate_math import monthly_payment, remaining_balance
from forecaster.models.deal import LoanType


@dataclass(frozen=True)
class MortgagePayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class DebtSchedule:
    payments: list[MortgagePayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


@dataclass(frozen=True)
class YearlyDebt:
    year: int
    debt_service: Decimal
    interest: Decimal
    principal: Decimal


def scheduled_monthly_payment(
    principal: Decimal, annual_rate: Decimal, term_years: int, loan_type: LoanType
) -> Decimal:
    """Contractual monthly payment at drawdown."""
    if loan_type is LoanType.INTEREST_ONLY:
        return principal * annual_rate / 12
    return monthly_payment(principal, annual_rate, term_years)


def debt_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    hold_years: int,
    loan_type: LoanType = LoanType.REPAYMENT,
) -> DebtSchedule:
    """Generate the payment schedule for the holding period.

    Repayment loans stop once the term ends or the balance reaches zero, so
    the final amortizing year may hold fewer than 12 payments. Interest-only
    loans pay interest every month of the hold, even past the term.
    """
    pmt = scheduled_monthly_payment(principal, annual_rate, term_years, loan_type)
    r = annual_rate / 12
    interest_only = loan_type is LoanType.INTEREST_ONLY

    payments: list[MortgagePayment] = []
    balance = principal
    total_interest = Decimal("0")
    total_principal = Decimal("0")

    for period in range(1, hold_years * 12 + 1):
        if not interest_only and (period > term_years * 12 or balance <= 0):
            break

        interest = balance * r
        if interest_only:
            payment = interest
            principal_paid = Decimal("0")
        else:
            payment = pmt
            principal_paid = payment - interest
            # Final payment adjustment
            if principal_paid > balance:
                principal_paid = balance
                payment = interest + principal_paid
            balance = max(Decimal("0"), balance - principal_paid)

        total_interest += interest
        total_principal += principal_paid
        payments.append(MortgagePayment(
            period=period,
            payment=payment,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))

    return DebtSchedule(
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )


def yearly_debt_summary(schedule: DebtSchedule, hold_years: int) -> list[YearlyDebt]:
    """Aggregate the schedule by year; years after payoff report zero."""
    totals = [[Decimal("0"), Decimal("0"), Decimal("0")] for _ in range(hold_years)]
    for p in schedule.payments:
        year_index = (p.period - 1) // 12
        if year_index >= hold_years:
            break
        totals[year_index][0] += p.payment
        totals[year_index][1] += p.interest
        totals[year_index][2] += p.principal

    return [
        YearlyDebt(year=i + 1, debt_service=ds, interest=interest, principal=principal)
        for i, (ds, interest, principal) in enumerate(totals)
    ]


def balance_after_year(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    year: int,
    loan_type: LoanType = LoanType.REPAYMENT,
) -> Decimal:
    """Closed-form balance at the end of `year`, never below zero."""
    if loan_type is LoanType.INTEREST_ONLY:
        return principal
    months_paid = min(year * 12, term_years * 12)
    return max(Decimal("0"), remaining_balance(principal, annual_rate, term_years, months_paid))
