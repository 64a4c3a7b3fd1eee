PRODUCTS_QUERY = """
query SeoAuditProducts($first: Int!, $imagesFirst: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        handle
        descriptionHtml
        seo {
          title
          description
        }
        featuredImage {
          url
          altText
        }
        images(first: $imagesFirst) {
          edges {
            node {
              url
              altText
            }
          }
        }
      }
    }
  }
}
"""

COLLECTIONS_QUERY = """
query SeoAuditCollections($first: Int!) {
  collections(first: $first) {
    edges {
      node {
        id
        title
        handle
        descriptionHtml
        seo {
          title
          description
        }
        image {
          url
          altText
        }
      }
    }
  }
}
"""

PAGES_QUERY = """
query SeoAuditPages($first: Int!) {
  pages(first: $first) {
    edges {
      node {
        id
        title
        handle
        body
      }
    }
  }
}
"""

ARTICLES_QUERY = """
query SeoAuditArticles($blogsFirst: Int!, $articlesFirst: Int!) {
  blogs(first: $blogsFirst) {
    edges {
      node {
        articles(first: $articlesFirst) {
          edges {
            node {
              id
              title
              handle
              contentHtml
              seo {
                title
                description
              }
              image {
                url
                altText
              }
            }
          }
        }
      }
    }
  }
}
"""
