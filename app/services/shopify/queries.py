"""GraphQL documents for the Shopify Admin API."""

VARIANT_BY_SKU_QUERY = """
query VariantBySku($query: String!, $levels: Int!) {
  productVariants(first: 1, query: $query) {
    nodes {
      id
      sku
      inventoryItem {
        id
        inventoryLevels(first: $levels) {
          edges {
            node {
              id
              location {
                id
              }
            }
          }
        }
      }
    }
  }
}
"""

# Absolute quantity set; ignoreCompareQuantity disables compare-and-swap.
INVENTORY_SET_QUANTITIES_MUTATION = """
mutation InventorySetQuantities($input: InventorySetQuantitiesInput!) {
  inventorySetQuantities(input: $input) {
    inventoryAdjustmentGroup {
      createdAt
      reason
    }
    userErrors {
      field
      message
    }
  }
}
"""

PRODUCTS_COUNT_QUERY = """
query ShopifyProductCount {
  productsCount {
    count
  }
}
"""
