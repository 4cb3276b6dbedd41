"""Basic usage examples for ReviewDigest."""

from datetime import datetime

from reviewdigest import ReviewSummarizer, Review
from reviewdigest.utils.data_prep import parse_reviews

SAMPLE_REVIEWS = [
    {"rating": 5, "comment": "Chất lượng rất tốt, đóng gói cẩn thận. Sẽ ủng hộ shop lần sau.", "createdAt": "2024-01-05T10:00:00Z"},
    {"rating": 5, "comment": "Giao hàng nhanh, sản phẩm đẹp như hình.", "createdAt": "2024-01-18T09:30:00Z"},
    {"rating": 4, "comment": "Giá hợp lý, dùng ổn trong tầm tiền.", "createdAt": "2024-02-02T14:00:00Z"},
    {"rating": 2, "comment": "Giao chậm gần một tuần, hộp bị móp.", "createdAt": "2024-02-20T08:15:00Z"},
    {"rating": 3, "comment": "Tạm được", "createdAt": None},
]


def example_summary():
    """Example: summarize a product's reviews."""
    print("Summarizing sample reviews")
    
    reviews = parse_reviews(SAMPLE_REVIEWS)
    summarizer = ReviewSummarizer()
    result = summarizer.summarize(reviews)
    
    print(f"Summary: {result.summary}")
    print(f"Sentiment: {result.sentiment.label} ({result.average_rating}/5)")
    print(f"Pros: {result.highlights.pros}")
    print(f"Cons: {result.highlights.cons}")
    for keyword in result.keywords:
        print(f"  {keyword.word}: {keyword.count}")
    for trend in result.time_trends:
        print(f"  {trend.month}: {trend.average_rating:.1f} ({trend.review_count} reviews)")
    for name, aspect in result.aspect_analysis.items():
        print(f"  {name}: {aspect.score:.1f}/5 ({aspect.count} mentions)")


def example_empty_product():
    """Example: an item with no reviews yet."""
    result = ReviewSummarizer().summarize([])
    print(f"\nEmpty product: {result.summary}")


def example_direct_reviews():
    """Example: build Review objects directly."""
    reviews = [
        Review(rating=1, comment="Dùng hai ngày đã hỏng, rất thất vọng.", created_at=datetime(2024, 3, 1)),
        Review(rating=2, comment="Chất lượng kém so với giá tiền.", created_at=datetime(2024, 3, 4)),
    ]
    result = ReviewSummarizer().summarize(reviews)
    print(f"\nNegative product: {result.summary}")


if __name__ == "__main__":
    example_summary()
    example_empty_product()
    example_direct_reviews()
