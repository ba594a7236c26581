"""Quick runtime checks for the quote calculator.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
from core.calculator import calculate_quote
from core.models import QuoteRequest


def main():
    # gold, 3 hours of photo
    res = calculate_quote(QuoteRequest(
        includes_photography=True,
        service_tier="gold",
        photo_rate_type="hourly",
        photo_duration=3,
    ))
    assert res.total == 300
    assert [i.amount for i in res.breakdown] == [300]

    # platinum video, 2 full days, reels + long recap, expedited
    res = calculate_quote(QuoteRequest(
        includes_videography=True,
        service_tier="platinum",
        video_rate_type="fullDay",
        video_days=2,
        num_reels=2,
        reel_duration=30,
        num_recaps=1,
        recap_duration=90,
        client_covers_travel=True,
        delivery_speed="expedited",
    ))
    assert [i.amount for i in res.breakdown] == [2800, 200, 300, 100]
    assert res.total == 3400

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
