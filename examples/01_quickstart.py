"""
🚀 Quick Start: How Many Leads Should Sales Call?
=================================================

**Time**: 2 minutes
**Next**: See 02_business_value.py for a decision tree vs random forest comparison

Score leads with any classifier, then let the profit curve tell you what
fraction of them is worth a sales call.
"""

import numpy as np

from profit_curves import (
    CostModel,
    ScoredDataset,
    argmax_profit,
    profit_at_fraction,
    profit_curve,
    random_baseline,
)

print("🚀 PROFIT CURVES - QUICK START")
print("=" * 40)

# =============================================================================
# 1. Scores from any classifier plus ground truth on a holdout set
# =============================================================================
rng = np.random.default_rng(42)
n_leads = 1000
bought = (rng.uniform(size=n_leads) < 0.3).astype(int)
scores = 1 / (1 + np.exp(-(rng.normal(size=n_leads) + 1.5 * (2 * bought - 1))))

dataset = ScoredDataset.from_predictions(scores, bought)
print(f"📊 {dataset.n_records} leads, {dataset.n_positive} bought ({dataset.base_rate:.1%})")

# =============================================================================
# 2. The economics of a call
# =============================================================================
costs = CostModel(benefit_true_positive=400, cost_false_positive=-600)
print("💰 Sale after a call: +$400   Wasted call: -$600")
print()

# =============================================================================
# 3. Sweep the targeting fraction
# =============================================================================
model = profit_curve(dataset, costs)
random = random_baseline(dataset, costs)

best = argmax_profit(model)
print(f"🎯 Call the top {best.fraction:.0%} ({best.targeted_count} leads)")
print(f"   Profit: ${best.profit:,.0f}")
print(f"   Random calling at the same fraction: ${profit_at_fraction(random, best.fraction).profit:,.0f}")
print()

print("Fraction  Model profit  Random profit")
for fraction in (0.0, 0.1, 0.2, 0.3, 0.5, 1.0):
    m = profit_at_fraction(model, fraction).profit
    r = profit_at_fraction(random, fraction).profit
    print(f"{fraction:>8.0%}  {m:>12,.0f}  {r:>13,.0f}")
