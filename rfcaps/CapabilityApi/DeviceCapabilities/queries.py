# DeviceCapabilities/queries.py

DEVICES_BY_BAND = """
query DevicesByBand($bandId: ID!, $technology: String) {
  devicesByBand(bandId: $bandId, technology: $technology) {
    supportStatus
    device { id vendor modelNum marketName releaseDate }
    software { id name buildNumber }
  }
}
"""

DEVICES_BY_BAND_PROVIDER = """
query DevicesByBandProvider($bandId: ID!, $providerId: ID!, $technology: String) {
  devicesByBand(bandId: $bandId, providerId: $providerId, technology: $technology) {
    supportStatus
    provider { id name country }
    device { id vendor modelNum marketName }
    software { id name buildNumber }
  }
}
"""

DEVICES_BY_COMBO = """
query DevicesByCombo($comboId: ID!, $technology: String) {
  devicesByCombo(comboId: $comboId, technology: $technology) {
    supportStatus
    device { id vendor modelNum marketName releaseDate }
    software { id name buildNumber }
  }
}
"""

DEVICES_BY_COMBO_PROVIDER = """
query DevicesByComboProvider($comboId: ID!, $providerId: ID!, $technology: String) {
  devicesByCombo(comboId: $comboId, providerId: $providerId, technology: $technology) {
    supportStatus
    provider { id name country }
    device { id vendor modelNum marketName }
    software { id name buildNumber }
  }
}
"""

# devicesByFeature takes no technology argument; an unused variable is ignored.
DEVICES_BY_FEATURE = """
query DevicesByFeature($featureId: ID!) {
  devicesByFeature(featureId: $featureId) {
    supportStatus
    device { id vendor modelNum marketName releaseDate }
    software { id name buildNumber }
  }
}
"""

DEVICES_BY_FEATURE_PROVIDER = """
query DevicesByFeatureProvider($featureId: ID!, $providerId: ID!) {
  devicesByFeature(featureId: $featureId, providerId: $providerId) {
    supportStatus
    provider { id name country }
    device { id vendor modelNum marketName }
    software { id name buildNumber }
  }
}
"""

SEARCH_DEVICES = """
query SearchDevices($vendor: String, $modelNum: String, $marketName: String, $limit: Int, $offset: Int) {
  devices(vendor: $vendor, modelNum: $modelNum, marketName: $marketName, limit: $limit, offset: $offset) {
    id vendor modelNum marketName releaseDate
  }
}
"""

GET_DEVICE = """
query GetDevice($id: ID!) {
  device(id: $id) {
    id vendor modelNum marketName releaseDate
    software { id name platform buildNumber releaseDate }
  }
}
"""

GET_DEVICE_COMPLETE = """
query GetDeviceComplete($id: ID!, $bandTechnology: String, $comboTechnology: String) {
  device(id: $id) {
    id vendor modelNum marketName releaseDate
    software { id name platform buildNumber releaseDate }
    supportedBands(technology: $bandTechnology) { id bandNumber technology dlBandClass ulBandClass }
    supportedCombos(technology: $comboTechnology) { id name technology }
    features { id name description }
  }
}
"""

GET_PROVIDER_DEVICE_COMPLETE = """
query GetProviderDeviceComplete($id: ID!, $providerId: ID!, $bandTechnology: String, $comboTechnology: String) {
  device(id: $id) {
    id vendor modelNum marketName releaseDate
    software { id name platform buildNumber releaseDate }
    supportedBandsForProvider(technology: $bandTechnology, providerId: $providerId) {
      id bandNumber technology dlBandClass ulBandClass
    }
    supportedCombosForProvider(technology: $comboTechnology, providerId: $providerId) {
      id name technology
    }
    features { id name description }
  }
}
"""

GET_PROVIDERS = """
query GetProviders {
  providers { id name country networkType }
}
"""

SEARCH_BANDS = """
query SearchBands($technology: String, $bandNumber: String) {
  bands(technology: $technology, bandNumber: $bandNumber) {
    id bandNumber technology dlBandClass ulBandClass
  }
}
"""

SEARCH_COMBOS = """
query SearchCombos($technology: String, $name: String) {
  combos(technology: $technology, name: $name) {
    id name technology
    bands { id bandNumber technology }
  }
}
"""

SEARCH_FEATURES = """
query SearchFeatures($name: String) {
  features(name: $name) { id name description }
}
"""
