"""
Built-in SAFE template bodies.

Both templates share one placeholder vocabulary:
company_name, investor_name, investor_title, founder_name, founder_title,
investment_amount, valuation_cap, discount_rate, equity_percent, state, date.

Monetary placeholders are substituted already formatted (with the "$" sign),
so the bodies never prefix them with a currency symbol.
"""

from ..errors import UnknownTemplateError
from ..models.deal import SafeTemplate

# =============================================================================
# YC Post-Money SAFE
# =============================================================================

YC_POST_MONEY_SAFE = """SAFE
(Simple Agreement for Future Equity)

THIS CERTIFIES THAT in exchange for the payment by {{investor_name}} (the "Investor") of {{investment_amount}} (the "Purchase Amount") on or about {{date}}, {{company_name}}, a {{state}} corporation (the "Company"), issues to the Investor the right to certain shares of the Company's Capital Stock, subject to the terms described below.

1. EVENTS

(a) Equity Financing. If there is an Equity Financing before the termination of this SAFE, on the initial closing of such Equity Financing, this SAFE will automatically convert into the number of shares of Safe Preferred Stock equal to the Purchase Amount divided by the Conversion Price.

    The "Conversion Price" means the lesser of:
    (i) the price per share equal to the Post-Money Valuation Cap of {{valuation_cap}} divided by the Company Capitalization; or
    (ii) the price per share of the Standard Preferred Stock sold in the Equity Financing multiplied by the Discount Rate of {{discount_rate}}%.

(b) Liquidity Event. If there is a Liquidity Event before the termination of this SAFE, the Investor will, at its option, either (i) receive a cash payment equal to the Purchase Amount or (ii) automatically receive from the Company a number of shares of Common Stock equal to the Purchase Amount divided by the Liquidity Price.

(c) Dissolution Event. If there is a Dissolution Event before the termination of this SAFE, the Investor will receive a portion of Remaining Assets equal to the Purchase Amount, due and payable immediately prior to, or concurrent with, the consummation of the Dissolution Event.

2. DEFINITIONS

"Company Capitalization" means the sum of (a) all shares of Capital Stock (on an as-converted basis) issued and outstanding, (b) all outstanding stock options and warrants, (c) shares reserved for future issuance under equity incentive plans, and (d) all shares of Capital Stock issuable upon conversion of all outstanding SAFEs.

"Post-Money Valuation Cap" means {{valuation_cap}}.

"Discount Rate" means {{discount_rate}}%.

"Equity Percentage" means {{equity_percent}}% of the Company Capitalization.

3. COMPANY REPRESENTATIONS

The Company is duly incorporated, validly existing, and in good standing under the laws of the state of {{state}}. The Company has the corporate power to execute and deliver this SAFE and to perform its obligations hereunder. This SAFE constitutes a valid and binding obligation of the Company.

4. INVESTOR REPRESENTATIONS

The Investor has the requisite power and authority to enter into this SAFE. The Investor is an "accredited investor" as defined in Rule 501 of Regulation D under the Securities Act.

5. MISCELLANEOUS

This SAFE sets forth the entire agreement and understanding of the parties relating to the subject matter herein. Any amendment or modification of this SAFE must be in writing and signed by both parties. This SAFE shall be governed by the laws of the State of {{state}}.

IN WITNESS WHEREOF, the undersigned have caused this SAFE to be duly executed and delivered.

COMPANY: {{company_name}}

By: ___________________________
Name: {{founder_name}}
Title: {{founder_title}}
Date: {{date}}

INVESTOR: {{investor_name}}

By: ___________________________
Name: {{investor_name}}
Title: {{investor_title}}
Date: {{date}}"""


# =============================================================================
# YC MFN (Most-Favored-Nation) SAFE
# =============================================================================

YC_MFN_SAFE = """SAFE
(Simple Agreement for Future Equity - Most Favored Nation)

THIS CERTIFIES THAT in exchange for the payment by {{investor_name}} (the "Investor") of {{investment_amount}} (the "Purchase Amount") on or about {{date}}, {{company_name}}, a {{state}} corporation (the "Company"), issues to the Investor the right to certain shares of the Company's Capital Stock, subject to the terms described below.

This SAFE includes a Most Favored Nation provision as set forth in Section 3.

1. EVENTS

(a) Equity Financing. If there is an Equity Financing before the termination of this SAFE, on the initial closing of such Equity Financing, this SAFE will automatically convert into the number of shares of Safe Preferred Stock equal to the Purchase Amount divided by the Conversion Price.

    The "Conversion Price" means the price per share of the Standard Preferred Stock sold in the Equity Financing multiplied by the Discount Rate of {{discount_rate}}%.

(b) Liquidity Event. If there is a Liquidity Event before the termination of this SAFE, the Investor will, at its option, either (i) receive a cash payment equal to the Purchase Amount or (ii) automatically receive from the Company a number of shares of Common Stock equal to the Purchase Amount divided by the Liquidity Price.

(c) Dissolution Event. If there is a Dissolution Event before the termination of this SAFE, the Investor will receive a portion of Remaining Assets equal to the Purchase Amount, due and payable immediately prior to, or concurrent with, the consummation of the Dissolution Event.

2. DEFINITIONS

"Discount Rate" means {{discount_rate}}%.

"Equity Percentage" means {{equity_percent}}% of the Company Capitalization.

"MFN" means if the Company issues any subsequent SAFE or convertible security with terms more favorable to its holder(s) than the terms of this SAFE, the Company shall promptly notify the Investor and, at the Investor's election, this SAFE will be amended to include such more favorable terms.

3. MOST FAVORED NATION PROVISION

If the Company issues any SAFE, convertible note, or similar instrument (a "Subsequent Convertible Security") after the date of this SAFE and before the conversion or termination of this SAFE with terms that are more favorable to the holder thereof (including, without limitation, a lower valuation cap, higher discount rate, or other more favorable economic terms), the Investor shall have the right to amend this SAFE to incorporate such more favorable terms.

Upon written request by the Investor within thirty (30) days of receiving notice of such issuance, the Company shall execute an amendment to this SAFE reflecting such more favorable terms.

4. COMPANY REPRESENTATIONS

The Company is duly incorporated, validly existing, and in good standing under the laws of the state of {{state}}. The Company has the corporate power to execute and deliver this SAFE and to perform its obligations hereunder.

5. INVESTOR REPRESENTATIONS

The Investor has the requisite power and authority to enter into this SAFE. The Investor is an "accredited investor" as defined in Rule 501 of Regulation D under the Securities Act.

6. MISCELLANEOUS

This SAFE sets forth the entire agreement and understanding of the parties relating to the subject matter herein. Any amendment or modification must be in writing and signed by both parties. This SAFE shall be governed by the laws of the State of {{state}}.

IN WITNESS WHEREOF, the undersigned have caused this SAFE to be duly executed and delivered.

COMPANY: {{company_name}}

By: ___________________________
Name: {{founder_name}}
Title: {{founder_title}}
Date: {{date}}

INVESTOR: {{investor_name}}

By: ___________________________
Name: {{investor_name}}
Title: {{investor_title}}
Date: {{date}}"""


TEMPLATES: dict[SafeTemplate, str] = {
    SafeTemplate.YC_STANDARD: YC_POST_MONEY_SAFE,
    SafeTemplate.YC_MFN: YC_MFN_SAFE,
    # No built-in body for custom terms; render them on the standard SAFE
    SafeTemplate.CUSTOM: YC_POST_MONEY_SAFE,
}


def get_template(name: SafeTemplate | str) -> str:
    """
    Look up a built-in template body.

    Args:
        name: SafeTemplate member or its string value ("yc-standard", "yc-mfn", "custom")

    Returns:
        Template body text

    Raises:
        UnknownTemplateError: name is not a known template
    """
    try:
        key = SafeTemplate(name)
    except ValueError as e:
        raise UnknownTemplateError(
            f"Unknown SAFE template: {name}",
            context={'known': [t.value for t in SafeTemplate]},
        ) from e
    return TEMPLATES[key]
